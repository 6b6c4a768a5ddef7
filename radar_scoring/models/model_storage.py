"""Storage file models for persisted score snapshots."""

from datetime import datetime

from pydantic import Field

from radar_scoring.consts import SCORES_FILE_VERSION
from radar_scoring.models.common import CamelModel, _utc_now
from radar_scoring.models.model_scores import CalculatedDimensionScore, VendorTotalScore


class ScoresFile(CamelModel):
    """Scores file stored in data/processed/scores/{chart_id}.json.

    Regenerable from the chart; version field enables schema migrations on load.
    """

    version: str = Field(default=SCORES_FILE_VERSION)
    computed_at: datetime = Field(default_factory=_utc_now)
    chart_id: str
    chart_name: str
    dimension_scores: list[CalculatedDimensionScore] = Field(default_factory=list)
    vendor_scores: list[VendorTotalScore] = Field(default_factory=list)
