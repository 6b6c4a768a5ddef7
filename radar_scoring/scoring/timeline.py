"""Scoring across dated charts referenced by a timeline chart.

A timeline owns no data. It points at regular charts carrying a time marker,
and vendors are matched between those charts by name.
"""

import logging

from radar_scoring.consts import (
    TIMELINE_DIMENSION_MISMATCH,
    TIMELINE_INVALID_SOURCES,
    TIMELINE_MIN_SOURCES,
    TIMELINE_MIN_SOURCES_REQUIRED,
    TIMELINE_MISSING_TIME_MARKER,
    TIMELINE_VENDOR_MISMATCH,
)
from radar_scoring.models.model_chart import Project, RadarChart, TimelineRadarChart
from radar_scoring.models.model_scores import TimelinePoint, TimelineScores, TimelineValidation
from radar_scoring.scoring.dimension import visible_vendors
from radar_scoring.scoring.totals import compute_vendor_total_scores

logger = logging.getLogger(__name__)


def _dimension_signature(chart: RadarChart) -> tuple[str, ...]:
    return tuple(sorted(d.name for d in chart.dimensions))


def _vendor_signature(chart: RadarChart) -> tuple[str, ...]:
    return tuple(sorted(v.name for v in chart.vendors))


def validate_timeline_sources(project: Project, source_ids: list[str]) -> TimelineValidation:
    """Check whether charts can be combined into a timeline.

    Unknown or timeline sources and too few sources fail immediately. The
    remaining checks (time markers, matching dimension names, matching vendor
    names) are all reported together.

    Args:
        project: Project holding the charts
        source_ids: IDs of the charts to combine

    Returns:
        TimelineValidation with error codes
    """
    if len(source_ids) < TIMELINE_MIN_SOURCES:
        return TimelineValidation(valid=False, errors=[TIMELINE_MIN_SOURCES_REQUIRED])

    charts = [project.get_chart(source_id) for source_id in source_ids]
    radars = [c for c in charts if isinstance(c, RadarChart)]
    if len(radars) != len(source_ids):
        return TimelineValidation(valid=False, errors=[TIMELINE_INVALID_SOURCES])

    errors = []
    if any(r.time_marker is None for r in radars):
        errors.append(TIMELINE_MISSING_TIME_MARKER)

    first = radars[0]
    if any(_dimension_signature(r) != _dimension_signature(first) for r in radars):
        errors.append(TIMELINE_DIMENSION_MISMATCH)
    if any(_vendor_signature(r) != _vendor_signature(first) for r in radars):
        errors.append(TIMELINE_VENDOR_MISMATCH)

    return TimelineValidation(valid=not errors, errors=errors)


def _resolve_sources(project: Project, timeline: TimelineRadarChart) -> list[RadarChart]:
    """Return the timeline's dated source charts in chronological order."""
    sources = []
    for source_id in timeline.source_radar_ids:
        chart = project.get_chart(source_id)
        if not isinstance(chart, RadarChart):
            logger.warning(f"Timeline '{timeline.id}' skips unknown or non-regular chart '{source_id}'")
            continue
        if chart.time_marker is None:
            logger.warning(f"Timeline '{timeline.id}' skips chart '{source_id}' without time marker")
            continue
        sources.append(chart)

    # Stable: charts with the same date keep their source order
    sources.sort(key=lambda c: c.time_marker.sort_key)
    return sources


def compute_timeline_scores(project: Project, timeline_id: str) -> TimelineScores | None:
    """Compute vendor totals at every time point of a timeline.

    Args:
        project: Project holding the timeline and its source charts
        timeline_id: ID of a TimelineRadarChart in the project

    Returns:
        TimelineScores, or None if the ID is not a timeline or no dated
        source chart remains

    Raises:
        ChartStructureError: If a source chart violates the ownership contract
    """
    timeline = project.get_chart(timeline_id)
    if not isinstance(timeline, TimelineRadarChart):
        logger.warning(f"Chart '{timeline_id}' is not a timeline in project '{project.id}'")
        return None

    sources = _resolve_sources(project, timeline)
    if not sources:
        logger.warning(f"Timeline '{timeline_id}' has no dated source charts")
        return None

    time_points = [
        TimelinePoint(
            chart_id=chart.id,
            chart_name=chart.name,
            time_marker=chart.time_marker,
            vendor_scores=compute_vendor_total_scores(chart),
        )
        for chart in sources
    ]

    # Vendor names in Vendor.order of first appearance, earliest time point first
    vendor_names: list[str] = []
    for chart in sources:
        for vendor in visible_vendors(chart.vendors):
            if vendor.name not in vendor_names:
                vendor_names.append(vendor.name)

    vendor_series: dict[str, list[float | None]] = {}
    for name in vendor_names:
        series = []
        for point in time_points:
            match = next((s for s in point.vendor_scores if s.vendor_name == name), None)
            series.append(match.total_score if match else None)
        vendor_series[name] = series

    return TimelineScores(
        timeline_id=timeline_id,
        time_points=time_points,
        vendor_series=vendor_series,
    )
