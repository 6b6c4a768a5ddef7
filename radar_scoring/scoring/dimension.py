"""Per-dimension scoring: aggregate sub-dimensions and apply dimension weights."""

import logging

from radar_scoring.consts import WEIGHT_SCALE
from radar_scoring.models.model_chart import Dimension, RadarChart, Vendor
from radar_scoring.models.model_scores import CalculatedDimensionScore, VendorDimensionScore
from radar_scoring.scoring.integrity import check_chart_structure, check_dimensions, check_vendors
from radar_scoring.scoring.utils import by_order, clamp_score, effective_weight, score_for

logger = logging.getLogger(__name__)


def visible_vendors(vendors: list[Vendor]) -> list[Vendor]:
    """Return visible vendors sorted by ``Vendor.order``."""
    return by_order(v for v in vendors if v.visible)


def get_dimension_score(dimension: Dimension, vendor_id: str) -> float:
    """Get a vendor's raw score for one dimension.

    Without sub-dimensions this is the vendor's own (clamped) score. With
    sub-dimensions it is their weighted average, weights renormalized over the
    non-zero ones. When every sub-dimension weight is zero the plain
    arithmetic mean is used instead.

    Args:
        dimension: Dimension to score
        vendor_id: Vendor to score

    Returns:
        Raw score between 0-10
    """
    if not dimension.sub_dimensions:
        return score_for(dimension.scores, vendor_id)

    subs = by_order(dimension.sub_dimensions)
    weights = [effective_weight(sub.weight) for sub in subs]
    total_weight = sum(weights)

    if total_weight <= 0:
        logger.debug(
            f"All sub-dimension weights are zero in '{dimension.id}', using arithmetic mean"
        )
        mean = sum(score_for(sub.scores, vendor_id) for sub in subs) / len(subs)
        return clamp_score(mean)

    weighted = sum(
        score_for(sub.scores, vendor_id) * (weight / total_weight)
        for sub, weight in zip(subs, weights)
    )
    # Renormalized weights can overshoot the bounds by one ulp
    return clamp_score(weighted)


def score_checked_dimensions(
    dimensions: list[Dimension],
    vendors: list[Vendor],
) -> list[CalculatedDimensionScore]:
    """Score dimensions for the visible vendors, skipping structural checks.

    Callers must have run ``check_dimensions`` and ``check_vendors`` first.
    """
    ordered_vendors = visible_vendors(vendors)
    results = []

    for dimension in by_order(dimensions):
        weight = effective_weight(dimension.weight)
        vendor_scores = []
        for vendor in ordered_vendors:
            raw_score = get_dimension_score(dimension, vendor.id)
            vendor_scores.append(
                VendorDimensionScore(
                    vendor_id=vendor.id,
                    vendor_name=vendor.name,
                    raw_score=raw_score,
                    weighted_score=raw_score * (weight / WEIGHT_SCALE),
                )
            )
        results.append(
            CalculatedDimensionScore(
                dimension_id=dimension.id,
                dimension_name=dimension.name,
                weight=weight,
                vendor_scores=vendor_scores,
            )
        )

    return results


def calculate_all_dimension_scores(
    dimensions: list[Dimension],
    vendors: list[Vendor],
) -> list[CalculatedDimensionScore]:
    """Score dimensions for vendors without a surrounding chart.

    Same semantics as ``compute_dimension_scores``; hidden vendors in
    ``vendors`` are skipped.

    Raises:
        ChartStructureError: If IDs collide or a sub-dimension is shared
    """
    check_dimensions(dimensions)
    check_vendors(vendors)
    return score_checked_dimensions(dimensions, vendors)


def compute_dimension_scores(chart: RadarChart) -> list[CalculatedDimensionScore]:
    """Compute every visible vendor's raw and weighted score per dimension.

    ``weighted_score = raw_score * weight / 100``, with the dimension weight
    used as given. Output follows ``Dimension.order``; vendor entries inside
    each dimension follow ``Vendor.order``. The chart is never modified.

    Args:
        chart: Chart snapshot to score

    Returns:
        One entry per top-level dimension, empty for an empty chart

    Raises:
        ChartStructureError: If the chart violates the ownership contract
    """
    check_chart_structure(chart)
    return score_checked_dimensions(chart.dimensions, chart.vendors)
