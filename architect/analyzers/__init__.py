"""Inspection routines that turn a project tree into report facts."""

from .lines import LineCounter
from .patterns import PatternDetector
from .services import ServiceDetector
from .testing import TestingFacts, collect_testing_facts
from .utils import activity_label, format_size, truncate

__all__ = [
    "LineCounter",
    "PatternDetector",
    "ServiceDetector",
    "TestingFacts",
    "activity_label",
    "collect_testing_facts",
    "format_size",
    "truncate",
]
