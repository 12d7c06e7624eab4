"""Summarises git state for the Overview chapter."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, TypeVar

from ..analyzers.utils import truncate
from ..errors import VcsQueryFailure
from ..logging import get_logger
from ..models import UNKNOWN, VcsSummary
from .provider import GitProvider

COMMIT_MESSAGE_LIMIT = 50

T = TypeVar("T")


class VersionControlSummarizer:
    """Builds a :class:`VcsSummary`; each field degrades on its own."""

    def __init__(self, provider: GitProvider | None = None) -> None:
        self.provider = provider or GitProvider()
        self.logger = get_logger("git.summary")

    def has_metadata(self, root: Path) -> bool:
        return self.provider.has_metadata(root)

    def summarize(self, root: Path) -> VcsSummary:
        branch = self._attempt(lambda: self.provider.current_branch(root).strip())
        message = self._attempt(lambda: self.provider.last_commit_message(root).strip())
        contributors = self._attempt(lambda: _count_distinct(self.provider.author_identities(root)))
        commits = self._attempt(lambda: _parse_count(self.provider.commit_count(root)))
        clean = self._attempt(lambda: not self.provider.status(root).strip())

        return VcsSummary(
            current_branch=branch or UNKNOWN,
            last_commit_message=truncate(message, COMMIT_MESSAGE_LIMIT) if message else UNKNOWN,
            contributor_count=contributors,
            total_commit_count=commits,
            is_clean=clean,
        )

    def _attempt(self, query: Callable[[], T]) -> Optional[T]:
        try:
            return query()
        except (VcsQueryFailure, ValueError) as exc:
            self.logger.debug("Degrading git field to unknown: %s", exc)
            return None


def _count_distinct(output: str) -> int:
    return len({line.strip() for line in output.splitlines() if line.strip()})


def _parse_count(output: str) -> int:
    return int(output.strip())


__all__ = ["COMMIT_MESSAGE_LIMIT", "VersionControlSummarizer"]
