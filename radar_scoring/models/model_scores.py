"""Result models emitted by the scoring engine to the rendering layer."""

from pydantic import Field, computed_field

from radar_scoring.models.common import CamelModel
from radar_scoring.models.model_chart import TimeMarker


class VendorDimensionScore(CamelModel):
    """One vendor's score in one dimension."""

    vendor_id: str
    vendor_name: str
    raw_score: float = Field(ge=0.0, le=10.0, description="Clamped, aggregated score")
    weighted_score: float = Field(ge=0.0, description="raw_score * weight / 100")


class CalculatedDimensionScore(CamelModel):
    """Scores of all visible vendors for one top-level dimension."""

    dimension_id: str
    dimension_name: str
    weight: float = Field(ge=0.0, description="Effective dimension weight (0-100)")
    vendor_scores: list[VendorDimensionScore] = Field(default_factory=list)


class DimensionContribution(CamelModel):
    """How much one dimension adds to a vendor's total."""

    dimension_id: str
    dimension_name: str
    score: float = Field(ge=0.0, le=10.0, description="Raw dimension score")
    weight: float = Field(ge=0.0)
    contribution: float = Field(ge=0.0, description="Weighted score added to the total")


class ContributionAnalysis(CamelModel):
    """Metadata for explaining what drives a vendor's total."""

    dominant_dimension_id: str | None = Field(
        default=None,
        description="Dimension driving the total, None when balanced",
    )
    dominance_ratio: float = Field(
        default=1.0,
        ge=1.0,
        description="Ratio of highest to second-highest contribution",
    )

    @computed_field
    @property
    def is_balanced(self) -> bool:
        """No single dimension dominates the total."""
        return self.dominant_dimension_id is None


class VendorTotalScore(CamelModel):
    """Ranked total for one visible vendor."""

    vendor_id: str
    vendor_name: str
    color: str
    total_score: float = Field(ge=0.0)
    rank: int = Field(ge=1, description="Competition rank, 1 = highest total")
    dimension_breakdown: list[DimensionContribution] = Field(default_factory=list)
    analysis: ContributionAnalysis = Field(default_factory=ContributionAnalysis)


class WeightValidation(CamelModel):
    """Result of checking a set of sibling weights."""

    valid: bool
    sum: float


class WeightIssue(CamelModel):
    """Sibling weights at one level of a chart that do not sum to 100."""

    chart_id: str
    dimension_id: str | None = Field(
        default=None, description="Parent dimension, None for top-level dimensions"
    )
    label: str
    sum: float


class TimelineValidation(CamelModel):
    """Result of checking whether charts can be combined into a timeline."""

    valid: bool
    errors: list[str] = Field(default_factory=list, description="Timeline error codes")


class TimelinePoint(CamelModel):
    """Vendor totals of one dated chart."""

    chart_id: str
    chart_name: str
    time_marker: TimeMarker
    vendor_scores: list[VendorTotalScore] = Field(default_factory=list)


class TimelineScores(CamelModel):
    """Vendor totals across the dated charts of a timeline."""

    timeline_id: str
    time_points: list[TimelinePoint] = Field(default_factory=list)
    vendor_series: dict[str, list[float | None]] = Field(
        default_factory=dict,
        description="Vendor name -> total per time point, None where absent",
    )
