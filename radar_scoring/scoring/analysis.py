"""Contribution analysis for explaining vendor totals."""

from radar_scoring.consts import DOMINANCE_BALANCED_RATIO, DOMINANCE_SINGLE_RATIO
from radar_scoring.models.model_scores import ContributionAnalysis, DimensionContribution


def analyze_contribution_dominance(breakdown: list[DimensionContribution]) -> ContributionAnalysis:
    """Analyze which dimension dominates a vendor's total.

    Determines if the total is balanced or driven primarily by one dimension,
    so the UI can say why a vendor ranks where it does.

    Dominance ratio interpretation:
    - < 1.2: Balanced across dimensions
    - 1.2 - 2.0: Emphasis on one dimension
    - > 2.0: Total dominated by single dimension

    Args:
        breakdown: Per-dimension contributions of one vendor

    Returns:
        ContributionAnalysis with dominant dimension and dominance ratio
    """
    if not breakdown:
        return ContributionAnalysis()

    # Sort by contribution descending; ties keep dimension order
    ranked = sorted(breakdown, key=lambda b: b.contribution, reverse=True)

    highest = ranked[0]
    second_contribution = ranked[1].contribution if len(ranked) > 1 else 0.0

    # Handle divide by zero
    if second_contribution == 0:
        if highest.contribution == 0:
            # Nothing contributes - call it balanced
            return ContributionAnalysis()
        return ContributionAnalysis(
            dominant_dimension_id=highest.dimension_id,
            dominance_ratio=DOMINANCE_SINGLE_RATIO,
        )

    dominance_ratio = highest.contribution / second_contribution

    if dominance_ratio < DOMINANCE_BALANCED_RATIO:
        return ContributionAnalysis(dominance_ratio=dominance_ratio)

    return ContributionAnalysis(
        dominant_dimension_id=highest.dimension_id,
        dominance_ratio=dominance_ratio,
    )
