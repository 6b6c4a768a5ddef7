"""Weighted hierarchical scoring for radar comparison charts."""
