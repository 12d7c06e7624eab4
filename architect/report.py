"""Report sections and the sinks that render them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, TextIO, Tuple, Union


class ReportSink(Protocol):
    """Receives report lines in emission order."""

    def heading(self, text: str) -> None:
        ...

    def key_value(self, key: str, value: str) -> None:
        ...

    def bullet_list(self, items: Sequence[str]) -> None:
        ...


@dataclass(frozen=True)
class Heading:
    text: str

    def emit(self, sink: ReportSink) -> None:
        sink.heading(self.text)


@dataclass(frozen=True)
class KeyValue:
    key: str
    value: str

    def emit(self, sink: ReportSink) -> None:
        sink.key_value(self.key, self.value)


@dataclass(frozen=True)
class BulletList:
    items: Tuple[str, ...]

    def emit(self, sink: ReportSink) -> None:
        sink.bullet_list(list(self.items))


ReportItem = Union[Heading, KeyValue, BulletList]


@dataclass
class ReportSection:
    """One chapter of the report: a title followed by ordered line items."""

    title: str
    items: List[ReportItem] = field(default_factory=list)

    def add_heading(self, text: str) -> None:
        self.items.append(Heading(text))

    def add_pair(self, key: str, value: object) -> None:
        self.items.append(KeyValue(key, str(value)))

    def add_bullets(self, items: Sequence[str]) -> None:
        self.items.append(BulletList(tuple(items)))

    def pairs(self) -> dict[str, str]:
        """Return the key/value items as a mapping (later keys win)."""
        return {item.key: item.value for item in self.items if isinstance(item, KeyValue)}

    def bullets(self) -> List[str]:
        result: List[str] = []
        for item in self.items:
            if isinstance(item, BulletList):
                result.extend(item.items)
        return result

    def emit(self, sink: ReportSink) -> None:
        sink.heading(self.title)
        for item in self.items:
            item.emit(sink)


class RecordingSink:
    """Sink that keeps every emitted event, used by tests and embedding callers."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []

    def heading(self, text: str) -> None:
        self.events.append(("heading", text))

    def key_value(self, key: str, value: str) -> None:
        self.events.append(("key_value", (key, value)))

    def bullet_list(self, items: Sequence[str]) -> None:
        self.events.append(("bullet_list", tuple(items)))

    def headings(self) -> List[str]:
        return [str(payload) for kind, payload in self.events if kind == "heading"]

    def lines(self) -> List[str]:
        """Flatten events into printable lines."""
        rendered: List[str] = []
        for kind, payload in self.events:
            if kind == "heading":
                rendered.append(str(payload))
            elif kind == "key_value":
                key, value = payload  # type: ignore[misc]
                rendered.append(f"{key}: {value}")
            else:
                rendered.extend(f"- {item}" for item in payload)  # type: ignore[union-attr]
        return rendered


class ConsoleSink:
    """Plain-text terminal renderer with dotted two-column details."""

    def __init__(self, stream: TextIO | None = None, *, width: int = 80) -> None:
        self._stream = stream or sys.stdout
        self._width = width

    def heading(self, text: str) -> None:
        self._write("")
        self._write(f"  {text}")
        self._write("")

    def key_value(self, key: str, value: str) -> None:
        filler = self._width - len(key) - len(value) - 6
        dots = "." * max(filler, 1)
        self._write(f"  {key} {dots} {value}")

    def bullet_list(self, items: Sequence[str]) -> None:
        for item in items:
            self._write(f"  * {item}")

    def title(self, text: str) -> None:
        rule = "=" * len(text)
        self._write("")
        self._write(rule)
        self._write(text)
        self._write(rule)

    def _write(self, line: str) -> None:
        print(line, file=self._stream)


__all__ = [
    "BulletList",
    "ConsoleSink",
    "Heading",
    "KeyValue",
    "RecordingSink",
    "ReportItem",
    "ReportSection",
    "ReportSink",
]
