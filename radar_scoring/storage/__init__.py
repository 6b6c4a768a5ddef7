"""Storage backends for chart snapshots and computed scores."""

from radar_scoring.storage.file_manager import FileManager

__all__ = [
    "FileManager",
]
