"""Tests for vendor totals and ranking."""

import math

import pytest

from radar_scoring.models.model_chart import Dimension, RadarChart, SubDimension, Vendor
from radar_scoring.scoring.ranking import assign_competition_ranks
from radar_scoring.scoring.totals import calculate_vendor_total_scores, compute_vendor_total_scores


def _single_dimension_chart(scores: dict[str, float], vendors: list[Vendor]) -> RadarChart:
    return RadarChart(
        id="c",
        name="C",
        dimensions=[Dimension(id="d", name="D", weight=100, scores=scores)],
        vendors=vendors,
    )


class TestAssignCompetitionRanks:
    """Tests for the ranking helper."""

    def test_distinct_totals(self) -> None:
        assert assign_competition_ranks([3.0, 9.0, 5.0]) == [3, 1, 2]

    def test_ties_share_rank_and_skip(self) -> None:
        assert assign_competition_ranks([8.0, 8.0, 5.0]) == [1, 1, 3]

    def test_epsilon_tie(self) -> None:
        """Floating-point noise below epsilon still ties."""
        assert assign_competition_ranks([0.1 + 0.2, 0.3, 0.1]) == [1, 1, 3]

    def test_lower_tie_group(self) -> None:
        assert assign_competition_ranks([9.0, 4.0, 4.0, 4.0, 1.0]) == [1, 2, 2, 2, 5]

    def test_empty(self) -> None:
        assert assign_competition_ranks([]) == []

    def test_rank_counts_strictly_greater_totals(self) -> None:
        """A total ranks below only those more than epsilon above it."""
        assert assign_competition_ranks([1.0, 1.0 - 0.8e-9, 1.0 - 1.6e-9]) == [1, 1, 2]


class TestComputeVendorTotalScores:
    """Tests for compute_vendor_total_scores."""

    def test_weighted_totals_and_ranks(self, weighted_chart) -> None:
        """Alpha = 6.4 (rank 2), Beta = 7.2 (rank 1)."""
        results = compute_vendor_total_scores(weighted_chart)

        assert [r.vendor_id for r in results] == ["b", "a"]
        beta, alpha = results
        assert beta.total_score == pytest.approx(7.2)
        assert beta.rank == 1
        assert alpha.total_score == pytest.approx(6.4)
        assert alpha.rank == 2
        assert alpha.color == "#5470c6"

    def test_breakdown_explains_total(self, weighted_chart) -> None:
        alpha = next(r for r in compute_vendor_total_scores(weighted_chart) if r.vendor_id == "a")

        assert [b.dimension_id for b in alpha.dimension_breakdown] == ["perf", "cost"]
        perf, cost = alpha.dimension_breakdown
        assert perf.score == 8.0
        assert perf.weight == 60.0
        assert perf.contribution == pytest.approx(4.8)
        assert cost.contribution == pytest.approx(1.6)
        assert sum(b.contribution for b in alpha.dimension_breakdown) == pytest.approx(
            alpha.total_score
        )

    def test_nested_dimension_total(self, nested_chart) -> None:
        results = compute_vendor_total_scores(nested_chart)
        totals = {r.vendor_id: r.total_score for r in results}
        assert totals == {"a": pytest.approx(5.0), "b": pytest.approx(6.0)}

    def test_tied_vendors_follow_vendor_order(self) -> None:
        """Tied vendors share a rank and are listed by Vendor.order."""
        vendors = [
            Vendor(id="a", name="A", order=2),
            Vendor(id="b", name="B", order=1),
            Vendor(id="c", name="C", order=0),
        ]
        chart = _single_dimension_chart({"a": 8, "b": 8, "c": 5}, vendors)

        results = compute_vendor_total_scores(chart)

        assert [(r.vendor_id, r.rank) for r in results] == [("b", 1), ("a", 1), ("c", 3)]

    def test_hidden_vendor_does_not_affect_ranks(self) -> None:
        vendors = [
            Vendor(id="a", name="A", order=0),
            Vendor(id="h", name="Hidden", order=1, visible=False),
            Vendor(id="b", name="B", order=2),
        ]
        chart = _single_dimension_chart({"a": 5, "h": 9, "b": 3}, vendors)

        results = compute_vendor_total_scores(chart)

        assert [(r.vendor_id, r.rank) for r in results] == [("a", 1), ("b", 2)]

    def test_missing_entry_equals_explicit_zero(self) -> None:
        vendors = [Vendor(id="a", name="A"), Vendor(id="b", name="B")]
        chart = RadarChart(
            id="c",
            name="C",
            dimensions=[
                Dimension(id="d1", name="D1", weight=50, scores={"a": 0, "b": 0}),
                Dimension(id="d2", name="D2", weight=50, scores={"a": 6, "b": 6}),
                Dimension(
                    id="d3",
                    name="D3",
                    weight=50,
                    sub_dimensions=[
                        SubDimension(id="s", name="S", scores={"a": 0}),
                    ],
                ),
            ],
            vendors=vendors,
        )
        chart.dimensions[0].scores.pop("b")

        a, b = compute_vendor_total_scores(chart)
        assert a.total_score == b.total_score
        assert a.rank == b.rank == 1

    def test_clamped_scores_flow_into_totals(self) -> None:
        vendors = [Vendor(id="low", name="Low"), Vendor(id="high", name="High")]
        chart = _single_dimension_chart({"low": -5, "high": 15}, vendors)

        totals = {r.vendor_id: r.total_score for r in compute_vendor_total_scores(chart)}

        assert totals == {"low": 0.0, "high": 10.0}

    def test_vendors_without_dimensions(self) -> None:
        chart = RadarChart(
            id="c",
            name="C",
            vendors=[Vendor(id="a", name="A"), Vendor(id="b", name="B")],
        )
        results = compute_vendor_total_scores(chart)

        assert [(r.vendor_id, r.total_score, r.rank) for r in results] == [
            ("a", 0.0, 1),
            ("b", 0.0, 1),
        ]
        assert results[0].dimension_breakdown == []
        assert results[0].analysis.is_balanced

    def test_empty_chart(self) -> None:
        assert compute_vendor_total_scores(RadarChart(id="c", name="Empty")) == []

    def test_idempotent(self, weighted_chart, nested_chart) -> None:
        for chart in (weighted_chart, nested_chart):
            assert compute_vendor_total_scores(chart) == compute_vendor_total_scores(chart)

    def test_input_not_mutated(self, weighted_chart) -> None:
        before = weighted_chart.model_dump()
        compute_vendor_total_scores(weighted_chart)
        assert weighted_chart.model_dump() == before

    def test_totals_always_finite(self) -> None:
        chart = RadarChart(
            id="c",
            name="C",
            dimensions=[
                Dimension(id="d1", name="D1", weight=float("nan"), scores={"a": 5}),
                Dimension(id="d2", name="D2", weight=40, scores={"a": float("nan")}),
            ],
            vendors=[Vendor(id="a", name="A")],
        )
        (result,) = compute_vendor_total_scores(chart)
        assert math.isfinite(result.total_score)
        assert result.total_score == 0.0

    def test_huge_weights_keep_totals_finite(self) -> None:
        chart = RadarChart(
            id="c",
            name="C",
            dimensions=[
                Dimension(id=f"d{i}", name=f"D{i}", weight=1e308, scores={"a": 10})
                for i in range(30)
            ],
            vendors=[Vendor(id="a", name="A")],
        )
        (result,) = compute_vendor_total_scores(chart)
        assert math.isfinite(result.total_score)
        assert all(math.isfinite(b.contribution) for b in result.dimension_breakdown)

    def test_dominant_dimension_attached(self, weighted_chart) -> None:
        alpha = next(r for r in compute_vendor_total_scores(weighted_chart) if r.vendor_id == "a")
        # 4.8 vs 1.6 -> ratio 3.0
        assert alpha.analysis.dominant_dimension_id == "perf"
        assert alpha.analysis.dominance_ratio == pytest.approx(3.0)

    def test_calculate_without_chart(self, weighted_chart) -> None:
        from_parts = calculate_vendor_total_scores(weighted_chart.dimensions, weighted_chart.vendors)
        assert from_parts == compute_vendor_total_scores(weighted_chart)

    def test_camel_case_output(self, weighted_chart) -> None:
        data = compute_vendor_total_scores(weighted_chart)[0].model_dump(by_alias=True)
        assert {"vendorId", "vendorName", "totalScore", "rank", "dimensionBreakdown"} <= data.keys()
        assert "contribution" in data["dimensionBreakdown"][0]
