"""File-based storage for chart snapshots and computed scores.

Provides operations for:
- Loading chart and project JSON snapshots exported by the editor
- Persisting computed scores per chart (versioned, regenerable)
"""

import json
import logging
from pathlib import Path

from radar_scoring.consts import DEFAULT_DATA_DIR
from radar_scoring.models.model_chart import Project, RadarChart
from radar_scoring.models.model_storage import ScoresFile
from radar_scoring.scoring.dimension import compute_dimension_scores
from radar_scoring.scoring.totals import compute_vendor_total_scores

logger = logging.getLogger(__name__)


class FileManager:
    """File-based storage manager for chart data.

    Directory structure:
        data/
        └── processed/scores/{chart_id}.json   # Computed scores per chart

    Snapshots are read from any path; only scores are written under data_dir.
    """

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Root directory for written files.
        """
        self.data_dir = Path(data_dir)
        self._scores_dir = self.data_dir / "processed" / "scores"

    def _read_json(self, path: Path | str) -> dict | None:
        path = Path(path)
        if not path.exists():
            logger.warning(f"Snapshot not found: {path}")
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    # === SNAPSHOT OPERATIONS ===

    def load_document(self, path: Path | str) -> Project | RadarChart | None:
        """Load a snapshot that may hold either a project or a single chart.

        Args:
            path: JSON file exported by the editor.

        Returns:
            Project if the file has a chart list, RadarChart otherwise,
            None if the file does not exist.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON.
            pydantic.ValidationError: If the document shape is invalid.
        """
        data = self._read_json(path)
        if data is None:
            return None
        if "radarCharts" in data or "radar_charts" in data:
            return Project.model_validate(data)
        return RadarChart.model_validate(data)

    def load_project(self, path: Path | str) -> Project | None:
        """Load a project snapshot.

        Returns:
            Project if found, None otherwise.
        """
        data = self._read_json(path)
        if data is None:
            return None
        return Project.model_validate(data)

    def load_chart(self, path: Path | str) -> RadarChart | None:
        """Load a single chart snapshot.

        Returns:
            RadarChart if found, None otherwise.
        """
        data = self._read_json(path)
        if data is None:
            return None
        return RadarChart.model_validate(data)

    # === SCORES OPERATIONS ===

    def _scores_path(self, chart_id: str) -> Path:
        """Return the scores file of a chart, which must sit directly in the scores dir.

        Raises:
            ValueError: If the chart ID would place the file elsewhere.
        """
        scores_dir = self._scores_dir.resolve()
        path = (scores_dir / f"{chart_id}.json").resolve()
        if path.parent != scores_dir:
            raise ValueError(f"Chart ID '{chart_id}' is not usable as a scores file name")
        return path

    def save_scores(self, chart: RadarChart) -> Path:
        """Compute and save scores for a chart.

        Overwrites any previous scores of the same chart.

        Args:
            chart: Chart to score.

        Returns:
            Path to the saved file.

        Raises:
            ChartStructureError: If the chart violates the ownership contract.
            ValueError: If the chart ID is not usable as a file name.
        """
        path = self._scores_path(chart.id)
        scores_file = ScoresFile(
            chart_id=chart.id,
            chart_name=chart.name,
            dimension_scores=compute_dimension_scores(chart),
            vendor_scores=compute_vendor_total_scores(chart),
        )

        self._scores_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(scores_file.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
        logger.info(f"Saved scores: {path} ({len(scores_file.vendor_scores)} vendors)")
        return path

    def load_scores(self, chart_id: str) -> ScoresFile | None:
        """Load saved scores for a chart.

        Returns:
            ScoresFile if found, None otherwise.

        Raises:
            ValueError: If the chart ID is not usable as a file name.
        """
        path = self._scores_path(chart_id)
        if not path.exists():
            logger.warning(f"Scores not found: {path}")
            return None

        data = json.loads(path.read_text(encoding="utf-8"))
        return ScoresFile.model_validate(data)

    def list_scores(self) -> list[str]:
        """List chart IDs with saved scores, sorted."""
        if not self._scores_dir.exists():
            return []
        return sorted(f.stem for f in self._scores_dir.glob("*.json"))
