"""Helper utilities for constructing temporary Laravel projects in tests."""

from __future__ import annotations

import json
import os
import textwrap
from pathlib import Path
from typing import Any, Mapping

DEFAULT_COMPOSER: dict[str, Any] = {
    "name": "acme/shop",
    "description": "Storefront for Acme",
    "require": {
        "php": "^8.2",
        "laravel/framework": "^11.0",
        "spatie/package-tools": "^1.0",
    },
    "require-dev": {
        "phpunit/phpunit": "^10.5",
    },
}


class ProjectBuilder:
    """Writes files into a throwaway project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def laravel(self, composer: Mapping[str, Any] | None = None) -> "ProjectBuilder":
        """Add the artisan marker and a composer.json."""
        self.write({"artisan": "#!/usr/bin/env php\n<?php\n"})
        self.composer(composer if composer is not None else DEFAULT_COMPOSER)
        return self

    def composer(self, data: Mapping[str, Any]) -> None:
        (self.root / "composer.json").write_text(json.dumps(data, indent=4), encoding="utf-8")

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, payload: bytes) -> None:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)

    def mkdir(self, relative: str) -> Path:
        path = self.root / relative
        path.mkdir(parents=True, exist_ok=True)
        return path

    def touch(self, relative: str, mtime: float) -> None:
        """Set both access and modification time of an existing file."""
        os.utime(self.root / relative, (mtime, mtime))

    def age_all(self, mtime: float) -> None:
        """Backdate every file in the project."""
        for dirpath, _, filenames in os.walk(self.root):
            for filename in filenames:
                os.utime(Path(dirpath) / filename, (mtime, mtime))

    def path(self) -> Path:
        return self.root


__all__ = ["DEFAULT_COMPOSER", "ProjectBuilder"]
