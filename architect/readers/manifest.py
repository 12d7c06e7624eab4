"""composer.json parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import ManifestMalformed, ManifestMissing
from ..filesystem import LocalFileSystem
from ..models import Manifest

MANIFEST_FILENAME = "composer.json"


class ManifestReader:
    """Loads the project manifest through the filesystem provider."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()

    def read(self, root: Path) -> Manifest:
        payload = self.filesystem.read_bytes(root / MANIFEST_FILENAME)
        if payload is None:
            raise ManifestMissing(f"{MANIFEST_FILENAME} not found in {root}")
        return parse_manifest(payload)


def parse_manifest(payload: bytes) -> Manifest:
    """Parse raw composer.json bytes; unknown fields are ignored."""
    try:
        data = json.loads(payload.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestMalformed(f"Could not parse {MANIFEST_FILENAME}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestMalformed(f"{MANIFEST_FILENAME} must contain a JSON object")

    return Manifest(
        name=_as_text(data.get("name")),
        description=_as_text(data.get("description")),
        require=_requirements(data, "require"),
        require_dev=_requirements(data, "require-dev"),
    )


def _requirements(data: Dict[str, Any], key: str) -> Dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    # composer writes an empty JSON array for an empty requirement map
    if value == []:
        return {}
    if not isinstance(value, dict):
        raise ManifestMalformed(f"'{key}' in {MANIFEST_FILENAME} must be an object")
    return {str(package): str(constraint) for package, constraint in value.items()}


def _as_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


__all__ = ["MANIFEST_FILENAME", "ManifestReader", "parse_manifest"]
