"""Subprocess-backed git queries."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..errors import VcsQueryFailure
from ..logging import get_logger

GitRunner = Callable[..., str]

DEFAULT_TIMEOUT = 5.0


class GitProvider:
    """Runs read-only git commands in the project root.

    Every query is independent: a failure or timeout raises
    :class:`VcsQueryFailure` for that query only.
    """

    def __init__(self, runner: GitRunner | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._runner = runner or self._default_runner
        self.timeout = timeout
        self.logger = get_logger("git")

    def has_metadata(self, root: Path) -> bool:
        return (root / ".git").exists()

    def current_branch(self, root: Path) -> str:
        return self._run(["git", "branch", "--show-current"], root)

    def last_commit_message(self, root: Path) -> str:
        return self._run(["git", "log", "-1", "--pretty=%B"], root)

    def author_identities(self, root: Path) -> str:
        return self._run(["git", "log", "--format=%aE"], root)

    def commit_count(self, root: Path) -> str:
        return self._run(["git", "rev-list", "--count", "HEAD"], root)

    def status(self, root: Path) -> str:
        return self._run(["git", "status", "--porcelain"], root)

    def _run(self, args: list[str], root: Path) -> str:
        try:
            return self._runner(args, cwd=root, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as exc:
            self.logger.debug("git query %r unavailable: %s", " ".join(args), exc)
            raise VcsQueryFailure(f"{' '.join(args)} failed: {exc}") from exc

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        timeout: float | None = None,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
            timeout=timeout,
        )
        return completed.stdout


__all__ = ["DEFAULT_TIMEOUT", "GitProvider", "GitRunner"]
