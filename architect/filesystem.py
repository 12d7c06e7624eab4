"""Local filesystem provider used by the readers, scanner and counters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .logging import get_logger

WalkEntry = Tuple[Path, List[str], List[str]]


class LocalFileSystem:
    """Thin read-only wrapper over the local disk."""

    def __init__(self) -> None:
        self.logger = get_logger("filesystem")

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_bytes(self, path: Path) -> Optional[bytes]:
        """Return file contents, or ``None`` when the file does not exist."""
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return None

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """Yield ``(directory, dirnames, filenames)``; unreadable directories are skipped.

        Callers may prune ``dirnames`` in place, as with :func:`os.walk`.
        """

        def _on_error(exc: OSError) -> None:
            self.logger.debug("Skipping unreadable path %s: %s", exc.filename, exc)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            yield Path(dirpath), dirnames, filenames

    def stat(self, path: Path) -> os.stat_result:
        return path.stat()

    def iter_lines(self, path: Path) -> Iterator[str]:
        """Stream a text file line by line without trailing newlines.

        Universal newline mode makes ``\\n``, ``\\r\\n`` and ``\\r`` equivalent.
        Open failures propagate to the caller.
        """
        with path.open("r", encoding="utf-8", errors="replace", newline=None) as handle:
            for line in handle:
                yield line.rstrip("\n")


__all__ = ["LocalFileSystem"]
