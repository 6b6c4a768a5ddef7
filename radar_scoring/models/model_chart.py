"""Chart document models shared with the editor and storage layers."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag

from radar_scoring.consts import PRESET_COLORS
from radar_scoring.models.common import CamelModel, _utc_now


class MarkerType(str, Enum):
    """Series marker shapes supported by the chart renderer."""

    CIRCLE = "circle"
    RECT = "rect"
    ROUND_RECT = "roundRect"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    PIN = "pin"
    ARROW = "arrow"


class SubDimension(CamelModel):
    """Scored child of a dimension."""

    id: str = Field(description="Unique within the parent dimension")
    name: str
    description: str = Field(default="")
    weight: float = Field(default=50.0, description="Relative weight among siblings (0-100)")
    order: int = Field(default=0, description="Display and tie-break order")
    scores: dict[str, float] = Field(
        default_factory=dict, description="Vendor ID -> raw score (0-10), may be sparse"
    )


class Dimension(CamelModel):
    """Top-level axis of a radar chart.

    When ``sub_dimensions`` is non-empty the dimension's own ``scores`` map
    is ignored and the sub-dimension scores are aggregated instead.
    """

    id: str = Field(description="Unique, stable dimension ID")
    name: str
    description: str = Field(default="")
    weight: float = Field(default=20.0, description="Relative weight among siblings (0-100)")
    order: int = Field(default=0, description="Display and tie-break order")
    scores: dict[str, float] = Field(
        default_factory=dict,
        description="Vendor ID -> raw score (0-10), used only without sub-dimensions",
    )
    sub_dimensions: list[SubDimension] = Field(default_factory=list)


class Vendor(CamelModel):
    """Compared product or company."""

    id: str = Field(description="Unique within the chart")
    name: str
    color: str = Field(default=PRESET_COLORS[0], description="HEX series color")
    marker_type: MarkerType = Field(default=MarkerType.CIRCLE)
    order: int = Field(default=0, description="Display and tie-break order")
    visible: bool = Field(default=True, description="Hidden vendors are not scored")


class TimeMarker(CamelModel):
    """Point in time a chart snapshot represents."""

    year: int
    month: int | None = Field(default=None, ge=1, le=12)

    @property
    def sort_key(self) -> int:
        """Chronological key; a missing month sorts as January."""
        return self.year * 100 + (self.month or 1)

    def label(self) -> str:
        """Display label, "2024" or "2023-06"."""
        if self.month is None:
            return str(self.year)
        return f"{self.year}-{self.month:02d}"


class RadarChart(CamelModel):
    """Regular radar chart: dimensions scored for a set of vendors."""

    id: str
    name: str
    order: int = Field(default=0)
    dimensions: list[Dimension] = Field(default_factory=list)
    vendors: list[Vendor] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)
    time_marker: TimeMarker | None = Field(
        default=None, description="Optional date used when the chart feeds a timeline"
    )


class TimelineRadarChart(CamelModel):
    """Chart that references dated regular charts instead of owning data."""

    id: str
    name: str
    order: int = Field(default=0)
    is_timeline: Literal[True] = True
    source_radar_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)


def _chart_kind(value: Any) -> str:
    """Discriminate timeline charts from regular ones in raw or parsed form."""
    if isinstance(value, dict):
        is_timeline = value.get("isTimeline", value.get("is_timeline", False))
    else:
        is_timeline = getattr(value, "is_timeline", False)
    return "timeline" if is_timeline is True else "radar"


AnyRadarChart = Annotated[
    Union[
        Annotated[RadarChart, Tag("radar")],
        Annotated[TimelineRadarChart, Tag("timeline")],
    ],
    Discriminator(_chart_kind),
]


def is_timeline_radar(chart: RadarChart | TimelineRadarChart) -> bool:
    return isinstance(chart, TimelineRadarChart)


class Project(CamelModel):
    """Collection of charts edited together."""

    id: str
    name: str
    description: str = Field(default="")
    radar_charts: list[AnyRadarChart] = Field(default_factory=list)
    active_radar_id: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    def get_chart(self, chart_id: str) -> RadarChart | TimelineRadarChart | None:
        """Return the chart with the given ID, or None."""
        for chart in self.radar_charts:
            if chart.id == chart_id:
                return chart
        return None

    def regular_charts(self) -> list[RadarChart]:
        """Return the regular (non-timeline) charts in project order."""
        return [c for c in self.radar_charts if isinstance(c, RadarChart)]
