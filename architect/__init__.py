"""Narrative analysis of Laravel project directories."""

from .errors import (
    AnalysisFailed,
    ArchitectError,
    EnvReadFailure,
    ManifestMalformed,
    ManifestMissing,
    NotAProject,
    VcsQueryFailure,
)
from .models import AnalysisOptions, AnalysisResult
from .orchestrator import ProjectAnalyzer

__version__ = "0.1.0"

__all__ = [
    "AnalysisFailed",
    "AnalysisOptions",
    "AnalysisResult",
    "ArchitectError",
    "EnvReadFailure",
    "ManifestMalformed",
    "ManifestMissing",
    "NotAProject",
    "ProjectAnalyzer",
    "VcsQueryFailure",
]
