"""Weight validation and normalization helpers for the editor.

The engine uses dimension weights as given and never requires them to sum to
100. These helpers let the editor warn about, or fix, weights that don't.
"""

import logging

from radar_scoring.consts import WEIGHT_SCALE, WEIGHT_SUM_TOLERANCE
from radar_scoring.models.model_chart import RadarChart
from radar_scoring.models.model_scores import WeightIssue, WeightValidation
from radar_scoring.scoring.utils import effective_weight

logger = logging.getLogger(__name__)


def validate_weights(weights: list[float]) -> WeightValidation:
    """Check that sibling weights sum to 100.

    An all-zero set is accepted too; scoring falls back to equal treatment.
    """
    total = sum(effective_weight(w) for w in weights)
    valid = abs(total - WEIGHT_SCALE) < WEIGHT_SUM_TOLERANCE or total == 0
    return WeightValidation(valid=valid, sum=total)


def normalize_weights(weights: list[float]) -> list[float]:
    """Rescale weights so they sum to 100, rounded to 2 decimals.

    Args:
        weights: Sibling weights in any scale

    Returns:
        Rescaled weights; an equal split when every weight is zero
    """
    if not weights:
        return []

    effective = [effective_weight(w) for w in weights]
    total = sum(effective)
    if total == 0:
        return [WEIGHT_SCALE / len(weights)] * len(weights)

    return [round(w / total * WEIGHT_SCALE, 2) for w in effective]


def validate_chart_weights(chart: RadarChart) -> list[WeightIssue]:
    """Find every level of a chart whose sibling weights don't sum to 100.

    Checks the top-level dimensions and the sub-dimensions of each dimension.
    Never raises; issues are returned and logged as warnings.
    """
    issues = []

    if chart.dimensions:
        result = validate_weights([d.weight for d in chart.dimensions])
        if not result.valid:
            issues.append(
                WeightIssue(chart_id=chart.id, label="dimensions", sum=result.sum)
            )

    for dimension in chart.dimensions:
        if not dimension.sub_dimensions:
            continue
        result = validate_weights([s.weight for s in dimension.sub_dimensions])
        if not result.valid:
            issues.append(
                WeightIssue(
                    chart_id=chart.id,
                    dimension_id=dimension.id,
                    label=dimension.name,
                    sum=result.sum,
                )
            )

    for issue in issues:
        logger.warning(
            f"Weights of '{issue.label}' in chart '{chart.id}' sum to {issue.sum:g}, expected 100"
        )

    return issues
