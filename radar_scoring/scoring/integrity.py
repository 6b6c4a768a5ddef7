"""Structural checks run before any chart is scored.

Scores and weights are never validated here; the engine clamps those. These
checks only guard the ownership and uniqueness contract, whose violation would
make totals silently wrong.
"""

from radar_scoring.errors import ChartStructureError, StructureViolation
from radar_scoring.models.model_chart import Dimension, RadarChart, Vendor


def check_dimensions(dimensions: list[Dimension], chart_id: str | None = None) -> None:
    """Verify dimension IDs are unique and every sub-dimension has one owner.

    Raises:
        ChartStructureError: On the first violation found
    """
    seen_ids: set[str] = set()
    # Object identity -> owning dimension ID
    owners: dict[int, str] = {}

    for dimension in dimensions:
        if dimension.id in seen_ids:
            raise ChartStructureError(
                StructureViolation.DUPLICATE_DIMENSION_ID,
                f"dimension ID '{dimension.id}' appears more than once",
                chart_id,
            )
        seen_ids.add(dimension.id)

        sub_ids: set[str] = set()
        for sub in dimension.sub_dimensions:
            if sub.id in sub_ids:
                raise ChartStructureError(
                    StructureViolation.DUPLICATE_SUB_DIMENSION_ID,
                    f"sub-dimension ID '{sub.id}' appears more than once in '{dimension.id}'",
                    chart_id,
                )
            sub_ids.add(sub.id)

            owner = owners.get(id(sub))
            if owner is not None:
                raise ChartStructureError(
                    StructureViolation.SHARED_SUB_DIMENSION,
                    f"sub-dimension '{sub.id}' is shared by '{owner}' and '{dimension.id}'",
                    chart_id,
                )
            owners[id(sub)] = dimension.id


def check_vendors(vendors: list[Vendor], chart_id: str | None = None) -> None:
    """Verify vendor IDs are unique, hidden vendors included.

    Raises:
        ChartStructureError: If two vendors share an ID
    """
    seen_ids: set[str] = set()
    for vendor in vendors:
        if vendor.id in seen_ids:
            raise ChartStructureError(
                StructureViolation.DUPLICATE_VENDOR_ID,
                f"vendor ID '{vendor.id}' appears more than once",
                chart_id,
            )
        seen_ids.add(vendor.id)


def check_chart_structure(chart: RadarChart) -> None:
    """Run all structural checks on a chart.

    Raises:
        ChartStructureError: On the first violation found
    """
    check_dimensions(chart.dimensions, chart.id)
    check_vendors(chart.vendors, chart.id)
