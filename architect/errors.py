"""Error taxonomy for architect analysis runs."""

from __future__ import annotations


class ArchitectError(RuntimeError):
    """Base class for failures surfaced by the analysis engine."""


class NotAProject(ArchitectError):
    """Raised when the target directory lacks the entry script or manifest."""

    def __init__(self, root: str, missing: str) -> None:
        super().__init__(f"{root} is not a Laravel project (missing {missing})")
        self.root = root
        self.missing = missing


class ManifestError(ArchitectError):
    """Raised when composer.json cannot be used."""


class ManifestMissing(ManifestError):
    """Raised when composer.json is absent."""


class ManifestMalformed(ManifestError):
    """Raised when composer.json is not a JSON object."""


class EnvReadFailure(ArchitectError):
    """Raised internally when the .env file cannot be parsed; never fatal."""


class VcsQueryFailure(ArchitectError):
    """Raised by the git provider when a single query is unavailable."""


class AnalysisFailed(ArchitectError):
    """Raised when building a report section fails unexpectedly.

    ``sections`` holds the sections that were already emitted before the
    failure; they are not retracted from the sink.
    """

    def __init__(self, message: str, sections: list | None = None) -> None:
        super().__init__(message)
        self.sections = list(sections or [])


__all__ = [
    "AnalysisFailed",
    "ArchitectError",
    "EnvReadFailure",
    "ManifestError",
    "ManifestMalformed",
    "ManifestMissing",
    "NotAProject",
    "VcsQueryFailure",
]
