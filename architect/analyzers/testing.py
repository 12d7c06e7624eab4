"""Test-suite and code-quality tooling detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from ..filesystem import LocalFileSystem
from ..models import FileRecord, Manifest

TESTS_DIR = "tests"
TEST_FILE_SUFFIXES: tuple[str, ...] = ("Test.php", ".spec.php")

TEST_FRAMEWORKS: tuple[tuple[str, str], ...] = (
    ("pestphp/pest", "Pest"),
    ("phpunit/phpunit", "PHPUnit"),
)

CODE_STYLE_PACKAGES: tuple[tuple[str, str], ...] = (("laravel/pint", "Pint"),)
CODE_STYLE_FILES: tuple[tuple[str, str], ...] = (
    (".php-cs-fixer.php", "PHP CS Fixer"),
    ("phpcs.xml", "PHP_CodeSniffer"),
)

STATIC_ANALYSIS_PACKAGES: tuple[str, ...] = ("phpstan/phpstan", "larastan/larastan")
STATIC_ANALYSIS_FILES: tuple[str, ...] = ("phpstan.neon", "phpstan.neon.dist")

NOT_IDENTIFIED = "Not identified"
NOT_CONFIGURED = "Not configured"


@dataclass(frozen=True)
class TestingFacts:
    """Aggregated facts for the Testing & Quality chapter."""

    __test__ = False  # keep pytest from collecting this class

    total: int
    feature: int
    unit: int
    framework: str
    code_style: str
    static_analysis: bool


def count_tests(records: Iterable[FileRecord], directory: str = TESTS_DIR) -> int:
    """Count test files below ``directory`` (a POSIX path relative to the root)."""
    prefix = directory.rstrip("/") + "/"
    return sum(
        1
        for record in records
        if record.path.startswith(prefix)
        and record.path.rsplit("/", 1)[-1].endswith(TEST_FILE_SUFFIXES)
    )


def identify_test_framework(manifest: Manifest) -> str:
    for package, label in TEST_FRAMEWORKS:
        if package in manifest.require_dev:
            return label
    return NOT_IDENTIFIED


def identify_code_style(root: Path, manifest: Manifest, filesystem: LocalFileSystem) -> str:
    styles: List[str] = [
        label for package, label in CODE_STYLE_PACKAGES if package in manifest.require_dev
    ]
    styles.extend(
        label for filename, label in CODE_STYLE_FILES if filesystem.exists(root / filename)
    )
    return ", ".join(styles) if styles else NOT_CONFIGURED


def has_static_analysis(root: Path, manifest: Manifest, filesystem: LocalFileSystem) -> bool:
    if any(package in manifest.require_dev for package in STATIC_ANALYSIS_PACKAGES):
        return True
    return any(filesystem.exists(root / filename) for filename in STATIC_ANALYSIS_FILES)


def collect_testing_facts(
    root: Path,
    manifest: Manifest,
    records: Iterable[FileRecord],
    filesystem: LocalFileSystem,
) -> TestingFacts:
    records = list(records)
    return TestingFacts(
        total=count_tests(records),
        feature=count_tests(records, f"{TESTS_DIR}/Feature"),
        unit=count_tests(records, f"{TESTS_DIR}/Unit"),
        framework=identify_test_framework(manifest),
        code_style=identify_code_style(root, manifest, filesystem),
        static_analysis=has_static_analysis(root, manifest, filesystem),
    )


__all__ = [
    "NOT_CONFIGURED",
    "NOT_IDENTIFIED",
    "TestingFacts",
    "collect_testing_facts",
    "count_tests",
    "has_static_analysis",
    "identify_code_style",
    "identify_test_framework",
]
