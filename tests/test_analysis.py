"""Tests for contribution dominance analysis."""

import pytest

from radar_scoring.models.model_scores import DimensionContribution
from radar_scoring.scoring.analysis import analyze_contribution_dominance


def _breakdown(*contributions: float) -> list[DimensionContribution]:
    return [
        DimensionContribution(
            dimension_id=f"d{i}",
            dimension_name=f"Dimension {i}",
            score=min(contribution, 10.0),
            weight=100.0,
            contribution=contribution,
        )
        for i, contribution in enumerate(contributions)
    ]


def test_balanced():
    """Test close contributions are reported as balanced."""
    analysis = analyze_contribution_dominance(_breakdown(3.0, 2.8, 2.9))

    assert analysis.is_balanced
    assert analysis.dominant_dimension_id is None
    assert analysis.dominance_ratio == pytest.approx(3.0 / 2.9)


def test_dominated():
    """Test one large contribution dominates."""
    analysis = analyze_contribution_dominance(_breakdown(1.6, 4.8))

    assert not analysis.is_balanced
    assert analysis.dominant_dimension_id == "d1"
    assert analysis.dominance_ratio == pytest.approx(3.0)


def test_all_zero():
    """Test all-zero contributions are balanced with ratio 1."""
    analysis = analyze_contribution_dominance(_breakdown(0.0, 0.0))

    assert analysis.is_balanced
    assert analysis.dominance_ratio == 1.0


def test_single_non_zero():
    """Test a single contributing dimension gets the sentinel ratio."""
    analysis = analyze_contribution_dominance(_breakdown(0.0, 5.0, 0.0))

    assert analysis.dominant_dimension_id == "d1"
    assert analysis.dominance_ratio == 999.0


def test_single_dimension():
    """Test a lone dimension dominates when it contributes anything."""
    analysis = analyze_contribution_dominance(_breakdown(2.0))

    assert analysis.dominant_dimension_id == "d0"
    assert analysis.dominance_ratio == 999.0


def test_empty_breakdown():
    """Test an empty breakdown is balanced."""
    analysis = analyze_contribution_dominance([])

    assert analysis.is_balanced
    assert analysis.dominance_ratio == 1.0


def test_tie_for_highest_is_balanced():
    """Test equal top contributions are balanced (ratio 1.0)."""
    analysis = analyze_contribution_dominance(_breakdown(4.0, 4.0, 1.0))

    assert analysis.is_balanced
    assert analysis.dominance_ratio == 1.0
