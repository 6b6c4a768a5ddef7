"""Exceptions raised by the scoring engine."""

from enum import Enum


class StructureViolation(str, Enum):
    """Structural contract violations that abort scoring for a chart."""

    DUPLICATE_DIMENSION_ID = "duplicate_dimension_id"
    DUPLICATE_SUB_DIMENSION_ID = "duplicate_sub_dimension_id"
    SHARED_SUB_DIMENSION = "shared_sub_dimension"
    DUPLICATE_VENDOR_ID = "duplicate_vendor_id"


class ScoringError(Exception):
    """Base class for scoring engine errors."""


class ChartStructureError(ScoringError):
    """Chart document violates the ownership or uniqueness contract.

    Raised instead of returning totals that would silently be wrong. Callers
    are expected to catch it per chart and report the chart as corrupted.
    """

    def __init__(self, reason: StructureViolation, message: str, chart_id: str | None = None):
        self.reason = reason
        self.chart_id = chart_id
        prefix = f"Chart '{chart_id}': " if chart_id else ""
        super().__init__(f"{prefix}{message}")
