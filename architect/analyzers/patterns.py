"""Architectural pattern detection from the application directory layout."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..filesystem import LocalFileSystem

APP_SOURCE_DIR = "app"

PATTERN_RULES: tuple[tuple[str, str], ...] = (
    ("Services", "Service Layer"),
    ("Repositories", "Repository Pattern"),
    ("Actions", "Action Pattern"),
    ("DataTransferObjects", "DTO Pattern"),
    ("Presenters", "Presenter Pattern"),
    ("Policies", "Policy Pattern"),
    ("Events", "Event-Driven Architecture"),
    ("Jobs", "Queue-based Processing"),
    ("ViewModels", "View Model Pattern"),
)


class PatternDetector:
    """Maps well-known ``app/`` subdirectories to pattern labels."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()

    def detect(self, root: Path) -> List[str]:
        source_root = root / APP_SOURCE_DIR
        return [
            label
            for directory, label in PATTERN_RULES
            if self.filesystem.is_dir(source_root / directory)
        ]


__all__ = ["APP_SOURCE_DIR", "PATTERN_RULES", "PatternDetector"]
