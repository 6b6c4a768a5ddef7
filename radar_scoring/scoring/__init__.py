"""Scoring engine for radar comparison charts.

Turns a chart's dimension tree, per-vendor raw scores (0-10) and weights
(0-100) into:
- Per-dimension raw and weighted scores for every visible vendor
- Ranked vendor totals with per-dimension contribution breakdowns

All functions are pure: they read a chart snapshot, never modify it, and
produce the same output for the same input.
"""

from radar_scoring.scoring.analysis import analyze_contribution_dominance
from radar_scoring.scoring.dimension import (
    calculate_all_dimension_scores,
    compute_dimension_scores,
    get_dimension_score,
    visible_vendors,
)
from radar_scoring.scoring.integrity import check_chart_structure
from radar_scoring.scoring.ranking import assign_competition_ranks
from radar_scoring.scoring.timeline import compute_timeline_scores, validate_timeline_sources
from radar_scoring.scoring.totals import calculate_vendor_total_scores, compute_vendor_total_scores
from radar_scoring.scoring.utils import clamp_score, score_for
from radar_scoring.scoring.weights import (
    normalize_weights,
    validate_chart_weights,
    validate_weights,
)

__all__ = [
    # Engine
    "compute_dimension_scores",
    "compute_vendor_total_scores",
    "calculate_all_dimension_scores",
    "calculate_vendor_total_scores",
    "get_dimension_score",
    # Building blocks
    "assign_competition_ranks",
    "check_chart_structure",
    "clamp_score",
    "score_for",
    "visible_vendors",
    # Explanations
    "analyze_contribution_dominance",
    # Weights
    "normalize_weights",
    "validate_chart_weights",
    "validate_weights",
    # Timelines
    "compute_timeline_scores",
    "validate_timeline_sources",
]
