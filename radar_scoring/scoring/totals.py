"""Vendor totals, ranks and per-dimension breakdowns."""

import logging

from radar_scoring.models.model_chart import Dimension, RadarChart, Vendor
from radar_scoring.models.model_scores import (
    CalculatedDimensionScore,
    DimensionContribution,
    VendorTotalScore,
)
from radar_scoring.scoring.analysis import analyze_contribution_dominance
from radar_scoring.scoring.dimension import score_checked_dimensions, visible_vendors
from radar_scoring.scoring.integrity import check_chart_structure, check_dimensions, check_vendors
from radar_scoring.scoring.ranking import assign_competition_ranks

logger = logging.getLogger(__name__)


def _rank_vendors(
    dimension_scores: list[CalculatedDimensionScore],
    vendors: list[Vendor],
) -> list[VendorTotalScore]:
    """Sum weighted scores per vendor, rank them and attach breakdowns."""
    ordered_vendors = visible_vendors(vendors)

    breakdowns: dict[str, list[DimensionContribution]] = {v.id: [] for v in ordered_vendors}
    for dimension_score in dimension_scores:
        for vendor_score in dimension_score.vendor_scores:
            breakdowns[vendor_score.vendor_id].append(
                DimensionContribution(
                    dimension_id=dimension_score.dimension_id,
                    dimension_name=dimension_score.dimension_name,
                    score=vendor_score.raw_score,
                    weight=dimension_score.weight,
                    contribution=vendor_score.weighted_score,
                )
            )

    totals = [sum(b.contribution for b in breakdowns[v.id]) for v in ordered_vendors]
    ranks = assign_competition_ranks(totals)

    results = [
        VendorTotalScore(
            vendor_id=vendor.id,
            vendor_name=vendor.name,
            color=vendor.color,
            total_score=total,
            rank=rank,
            dimension_breakdown=breakdowns[vendor.id],
            analysis=analyze_contribution_dominance(breakdowns[vendor.id]),
        )
        for vendor, total, rank in zip(ordered_vendors, totals, ranks)
    ]

    # Stable sort: tied vendors stay in Vendor.order
    results.sort(key=lambda r: r.rank)
    return results


def calculate_vendor_total_scores(
    dimensions: list[Dimension],
    vendors: list[Vendor],
) -> list[VendorTotalScore]:
    """Rank vendors without a surrounding chart.

    Same semantics as ``compute_vendor_total_scores``; hidden vendors in
    ``vendors`` are skipped.

    Raises:
        ChartStructureError: If IDs collide or a sub-dimension is shared
    """
    check_dimensions(dimensions)
    check_vendors(vendors)
    return _rank_vendors(score_checked_dimensions(dimensions, vendors), vendors)


def compute_vendor_total_scores(chart: RadarChart) -> list[VendorTotalScore]:
    """Compute ranked totals for every visible vendor of a chart.

    ``total_score`` is the sum of the vendor's weighted dimension scores.
    Ranks use competition ranking with an epsilon tolerance: equal totals
    share a rank and the next distinct total gets its position (1, 1, 3).
    Results are ordered by rank, tied vendors by ``Vendor.order``.

    Args:
        chart: Chart snapshot to score

    Returns:
        One entry per visible vendor, empty when there are none

    Raises:
        ChartStructureError: If the chart violates the ownership contract
    """
    check_chart_structure(chart)
    results = _rank_vendors(score_checked_dimensions(chart.dimensions, chart.vendors), chart.vendors)
    logger.debug(f"Scored chart '{chart.id}': {len(results)} vendors, {len(chart.dimensions)} dimensions")
    return results
