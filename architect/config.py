"""Configuration loading for architect (.architect.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".architect.yml"

DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = ("vendor", "node_modules")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ArchitectConfig:
    """Represents the settings defined in .architect.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATHS))
    source_extension: str = ".php"
    skip_hidden: bool = True
    recent_files_limit: int = 5
    activity_window_days: int = 7
    vcs_timeout: float = 5.0


def load_config(config_path: Path) -> ArchitectConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ArchitectConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = ArchitectConfig(root=root)

    for pattern in _as_str_list(data.get("exclude_paths")):
        cleaned = pattern.strip().strip("/")
        if cleaned and cleaned not in config.exclude_paths:
            config.exclude_paths.append(cleaned)

    extension = _as_str(data.get("source_extension"))
    if extension:
        config.source_extension = extension if extension.startswith(".") else f".{extension}"

    skip_hidden = _as_bool(data.get("skip_hidden"))
    if skip_hidden is not None:
        config.skip_hidden = skip_hidden

    limit = _as_int(data.get("recent_files_limit"))
    if limit is not None:
        if limit < 0:
            raise ConfigError("recent_files_limit must not be negative")
        config.recent_files_limit = limit

    activity_data = _as_dict(data.get("activity"))
    window = _as_int(activity_data.get("window_days"))
    if window is not None:
        if window <= 0:
            raise ConfigError("activity.window_days must be positive")
        config.activity_window_days = window

    vcs_data = _as_dict(data.get("vcs"))
    timeout = _as_float(vcs_data.get("timeout"))
    if timeout is not None:
        if timeout <= 0:
            raise ConfigError("vcs.timeout must be positive")
        config.vcs_timeout = timeout

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
