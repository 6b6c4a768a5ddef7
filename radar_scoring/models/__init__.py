"""Pydantic models for radar chart scoring."""

from radar_scoring.models.model_chart import (
    AnyRadarChart,
    Dimension,
    MarkerType,
    Project,
    RadarChart,
    SubDimension,
    TimelineRadarChart,
    TimeMarker,
    Vendor,
    is_timeline_radar,
)
from radar_scoring.models.model_scores import (
    CalculatedDimensionScore,
    ContributionAnalysis,
    DimensionContribution,
    TimelinePoint,
    TimelineScores,
    TimelineValidation,
    VendorDimensionScore,
    VendorTotalScore,
    WeightIssue,
    WeightValidation,
)
from radar_scoring.models.model_storage import ScoresFile

__all__ = [
    # Chart models
    "AnyRadarChart",
    "Dimension",
    "MarkerType",
    "Project",
    "RadarChart",
    "SubDimension",
    "TimelineRadarChart",
    "TimeMarker",
    "Vendor",
    "is_timeline_radar",
    # Result models
    "CalculatedDimensionScore",
    "ContributionAnalysis",
    "DimensionContribution",
    "VendorDimensionScore",
    "VendorTotalScore",
    # Validation models
    "WeightIssue",
    "WeightValidation",
    "TimelineValidation",
    # Timeline models
    "TimelinePoint",
    "TimelineScores",
    # Storage models
    "ScoresFile",
]
