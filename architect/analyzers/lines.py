"""Source line counting for the KLOC figure."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from ..filesystem import LocalFileSystem
from ..logging import get_logger
from ..tree_scanner import FileTreeScanner

_COMMENT_ONLY = re.compile(r"^\s*(//|/\*|\*|\*/|#)\s*$")


class LineCounter:
    """Counts lines that are neither blank nor a bare comment marker."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.scanner = FileTreeScanner(self.filesystem)
        self.logger = get_logger("lines")

    def count_source_lines(
        self,
        root: Path,
        extension: str,
        exclude_paths: Sequence[str] = (),
        *,
        skip_hidden: bool = False,
    ) -> int:
        """Return the total across files ending in ``extension``.

        A file that cannot be opened aborts the whole count.
        """
        total = 0
        files = 0
        for path in self.scanner.iter_files(
            root, exclude=exclude_paths, skip_hidden=skip_hidden
        ):
            if not path.name.endswith(extension):
                continue
            total += self.count_file(path)
            files += 1
        self.logger.debug("Counted %d source lines across %d %s files", total, files, extension)
        return total

    def count_file(self, path: Path) -> int:
        count = 0
        for line in self.filesystem.iter_lines(path):
            if not line.strip():
                continue
            if _COMMENT_ONLY.match(line):
                continue
            count += 1
        return count

    @staticmethod
    def kloc(total_lines: int) -> float:
        return round(total_lines / 1000, 2)


__all__ = ["LineCounter"]
