"""Recursive file enumeration for a project tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Sequence

from .filesystem import LocalFileSystem
from .logging import get_logger
from .models import FileRecord


class FileTreeScanner:
    """Walks a directory tree and returns a record per file."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = get_logger("scanner")

    def scan(
        self,
        root: Path,
        *,
        exclude: Sequence[str] = (),
        skip_hidden: bool = False,
    ) -> List[FileRecord]:
        """Return records for every file under ``root`` in walk order.

        ``exclude`` names directory components that are pruned wherever they
        appear. Files that vanish or cannot be stat'ed are skipped.
        """
        records: List[FileRecord] = []
        for path in self.iter_files(root, exclude=exclude, skip_hidden=skip_hidden):
            try:
                stat_result = self.filesystem.stat(path)
            except OSError as exc:
                self.logger.debug("Skipping %s: %s", path, exc)
                continue
            records.append(
                FileRecord(
                    path=path.relative_to(root).as_posix(),
                    size=stat_result.st_size,
                    mtime=stat_result.st_mtime,
                )
            )
        self.logger.debug("Scanned %d files under %s", len(records), root)
        return records

    def iter_files(
        self,
        root: Path,
        *,
        exclude: Sequence[str] = (),
        skip_hidden: bool = False,
    ) -> Iterator[Path]:
        excluded = set(exclude)
        for current_dir, dirnames, filenames in self.filesystem.walk(root):
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in excluded and not (skip_hidden and name.startswith("."))
            )
            for filename in sorted(filenames):
                if skip_hidden and filename.startswith("."):
                    continue
                yield current_dir / filename


__all__ = ["FileTreeScanner"]
