"""Optional closing chapters: an executive summary and a security review."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping

from .analyzers.testing import NOT_IDENTIFIED, TestingFacts
from .filesystem import LocalFileSystem
from .report import ReportSection

LOW_TEST_COUNT = 10

SENSITIVE_FILES: tuple[str, ...] = (
    ".env.backup",
    ".env.old",
    "storage/logs/laravel.log",
)


def build_executive_summary(testing: TestingFacts, env: Mapping[str, str]) -> ReportSection:
    strengths: List[str] = []
    suggestions: List[str] = []

    if testing.static_analysis:
        strengths.append("Static analysis is configured, showing commitment to code quality")
    else:
        suggestions.append("Consider adding static analysis with PHPStan/Larastan")

    if testing.framework != NOT_IDENTIFIED:
        strengths.append("Testing framework is in place")

    queue = env.get("QUEUE_CONNECTION")
    if queue and queue != "sync":
        strengths.append("Queue system is properly configured for background processing")

    if testing.total < LOW_TEST_COUNT:
        suggestions.append("Test coverage appears low, consider adding more tests")

    if env.get("APP_DEBUG") == "true":
        suggestions.append("Debug mode is enabled, remember to disable in production")

    section = ReportSection("Executive Summary")
    if strengths:
        section.add_heading("Project Strengths")
        section.add_bullets(strengths)
    if suggestions:
        section.add_heading("Suggestions for Improvement")
        section.add_bullets(suggestions)
    return section


def find_security_issues(
    root: Path, env: Mapping[str, str], filesystem: LocalFileSystem
) -> List[str]:
    issues: List[str] = []
    if env.get("APP_ENV", "local") != "local" and env.get("APP_DEBUG") == "true":
        issues.append("Debug mode is enabled in non-local environment")
    for relative in SENSITIVE_FILES:
        if filesystem.exists(root / relative):
            issues.append(f"Sensitive file exposed: {relative}")
    return issues


def build_security_review(
    root: Path, env: Mapping[str, str], filesystem: LocalFileSystem
) -> ReportSection:
    section = ReportSection("Security Review")
    issues = find_security_issues(root, env, filesystem)
    section.add_bullets(issues or ["No issues found"])
    return section


__all__ = ["build_executive_summary", "build_security_review", "find_security_issues"]
