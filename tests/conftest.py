"""Pytest configuration and fixtures."""

from datetime import UTC, datetime

import pytest

from radar_scoring.models.model_chart import (
    Dimension,
    Project,
    RadarChart,
    SubDimension,
    TimelineRadarChart,
    TimeMarker,
    Vendor,
)


@pytest.fixture
def two_vendors() -> list[Vendor]:
    """Vendors A and B in display order."""
    return [
        Vendor(id="a", name="Alpha", color="#5470c6", order=0),
        Vendor(id="b", name="Beta", color="#91cc75", order=1),
    ]


@pytest.fixture
def weighted_chart(two_vendors) -> RadarChart:
    """Two flat dimensions weighted 60/40.

    Alpha: 8 * 0.6 + 4 * 0.4 = 6.4
    Beta:  6 * 0.6 + 9 * 0.4 = 7.2
    """
    return RadarChart(
        id="chart-1",
        name="Cloud Vendors",
        dimensions=[
            Dimension(id="perf", name="Performance", weight=60, order=0, scores={"a": 8, "b": 6}),
            Dimension(id="cost", name="Cost", weight=40, order=1, scores={"a": 4, "b": 9}),
        ],
        vendors=two_vendors,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        updated_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def nested_chart(two_vendors) -> RadarChart:
    """One dimension with two equally weighted sub-dimensions."""
    return RadarChart(
        id="chart-2",
        name="Security",
        dimensions=[
            Dimension(
                id="sec",
                name="Security",
                weight=100,
                scores={"a": 1, "b": 1},  # ignored: sub-dimensions are authoritative
                sub_dimensions=[
                    SubDimension(id="s1", name="Encryption", weight=50, order=0, scores={"a": 10, "b": 4}),
                    SubDimension(id="s2", name="Auditing", weight=50, order=1, scores={"a": 0, "b": 8}),
                ],
            ),
        ],
        vendors=two_vendors,
    )


def _dated_chart(chart_id: str, year: int, month: int | None, alpha: float, beta: float) -> RadarChart:
    return RadarChart(
        id=chart_id,
        name=f"Snapshot {year}",
        dimensions=[
            Dimension(id="perf", name="Performance", weight=100, scores={"a": alpha, "b": beta}),
        ],
        vendors=[
            Vendor(id="a", name="Alpha", order=0),
            Vendor(id="b", name="Beta", order=1),
        ],
        time_marker=TimeMarker(year=year, month=month),
    )


@pytest.fixture
def timeline_project() -> Project:
    """Project with two dated charts, one undated chart and a timeline.

    The timeline lists its sources out of chronological order and includes an
    undated chart and an unknown ID, both of which are skipped.
    """
    return Project(
        id="proj-1",
        name="Vendor Tracking",
        radar_charts=[
            _dated_chart("y2024", 2024, None, alpha=9, beta=5),
            _dated_chart("y2023", 2023, 6, alpha=6, beta=7),
            RadarChart(id="undated", name="Draft"),
            TimelineRadarChart(
                id="tl",
                name="Progress",
                source_radar_ids=["y2024", "y2023", "undated", "missing"],
            ),
        ],
    )
