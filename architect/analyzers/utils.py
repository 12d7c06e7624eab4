"""Shared formatting helpers for report values."""

from __future__ import annotations

from typing import Sequence

_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB")

# Lower bounds are exclusive; the first matching bucket wins.
_ACTIVITY_BUCKETS: tuple[tuple[int, str], ...] = (
    (100, "Very Active"),
    (50, "Active"),
    (10, "Moderately Active"),
)


def format_size(num_bytes: int, units: Sequence[str] = _SIZE_UNITS) -> str:
    """Render a byte count with 1024-based units, e.g. ``1536 -> "1.5 KB"``."""
    value = float(max(num_bytes, 0))
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{format_number(value)} {units[index]}"


def format_number(value: float, places: int = 2) -> str:
    """Round to ``places`` decimals and drop trailing zeros."""
    text = f"{round(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def activity_label(recently_modified: int) -> str:
    for threshold, label in _ACTIVITY_BUCKETS:
        if recently_modified > threshold:
            return label
    return "Low Activity"


def truncate(text: str, limit: int, marker: str = "...") -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + marker


__all__ = ["activity_label", "format_number", "format_size", "truncate"]
