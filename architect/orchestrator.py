"""Analysis pipeline that turns a Laravel project into five report chapters."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .analyzers.lines import LineCounter
from .analyzers.patterns import PatternDetector
from .analyzers.services import ServiceDetector
from .analyzers.testing import TestingFacts, collect_testing_facts
from .analyzers.utils import activity_label, format_number, format_size
from .config import ArchitectConfig, load_config
from .errors import AnalysisFailed, NotAProject
from .filesystem import LocalFileSystem
from .git.provider import GitProvider
from .git.summary import VersionControlSummarizer
from .insights import build_executive_summary, build_security_review
from .logging import get_logger
from .models import (
    UNKNOWN,
    AnalysisOptions,
    AnalysisResult,
    EnvironmentMap,
    FileRecord,
    Manifest,
    VcsSummary,
)
from .readers.environment import EnvironmentReader
from .readers.manifest import MANIFEST_FILENAME, ManifestReader
from .report import ReportSection, ReportSink
from .tree_scanner import FileTreeScanner

ENTRY_SCRIPT = "artisan"
MAINTENANCE_MARKER = "storage/framework/down"

FRAMEWORK_PACKAGES: tuple[str, ...] = ("laravel/framework", "illuminate/support")
RUNTIME_PACKAGE = "php"
KEY_PACKAGE_LIMIT = 10

SECTION_TITLES: tuple[str, ...] = (
    "Chapter 1: Project Overview",
    "Chapter 2: Application Structure",
    "Chapter 3: Dependencies and Tech Stack",
    "Chapter 4: Testing and Quality",
    "Chapter 5: Infrastructure Setup",
)

# (label, directory relative to the root, recursive)
STRUCTURE_COUNTS: tuple[tuple[str, str, bool], ...] = (
    ("Controllers", "app/Http/Controllers", True),
    ("Models", "app/Models", True),
    ("Migrations", "database/migrations", True),
    ("Routes Files", "routes", False),
    ("Views", "resources/views", True),
    ("Tests", "tests", True),
    ("Config Files", "config", True),
    ("Commands", "app/Console/Commands", True),
)

# (label, environment key, default)
INFRASTRUCTURE_FACTS: tuple[tuple[str, str, str], ...] = (
    ("Queue System", "QUEUE_CONNECTION", "sync"),
    ("Cache Driver", "CACHE_STORE", "file"),
    ("Session Driver", "SESSION_DRIVER", "file"),
    ("Database", "DB_CONNECTION", "mysql"),
    ("Mail Driver", "MAIL_MAILER", "smtp"),
    ("Filesystem", "FILESYSTEM_DISK", "local"),
    ("Broadcasting", "BROADCAST_DRIVER", "log"),
)

_SECONDS_PER_DAY = 86_400


@dataclass
class _RunContext:
    root: Path
    options: AnalysisOptions
    manifest: Manifest
    env: EnvironmentMap
    records: List[FileRecord]
    testing: Optional[TestingFacts] = None


class ProjectAnalyzer:
    """Validates a project, gathers facts and emits the report chapters."""

    def __init__(
        self,
        sink: ReportSink,
        *,
        config: ArchitectConfig | None = None,
        filesystem: LocalFileSystem | None = None,
        manifest_reader: ManifestReader | None = None,
        env_reader: EnvironmentReader | None = None,
        scanner: FileTreeScanner | None = None,
        line_counter: LineCounter | None = None,
        pattern_detector: PatternDetector | None = None,
        service_detector: ServiceDetector | None = None,
        vcs: VersionControlSummarizer | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.sink = sink
        self.config = config
        self.filesystem = filesystem or LocalFileSystem()
        self.manifest_reader = manifest_reader or ManifestReader(self.filesystem)
        self.env_reader = env_reader or EnvironmentReader(self.filesystem)
        self.scanner = scanner or FileTreeScanner(self.filesystem)
        self.line_counter = line_counter or LineCounter(self.filesystem)
        self.pattern_detector = pattern_detector or PatternDetector(self.filesystem)
        self.service_detector = service_detector or ServiceDetector()
        self._vcs = vcs
        self.clock = clock
        self.logger = get_logger("orchestrator")

    def validate(self, root: Path) -> None:
        """Raise :class:`NotAProject` unless ``root`` holds artisan and composer.json."""
        for marker in (ENTRY_SCRIPT, MANIFEST_FILENAME):
            if not self.filesystem.exists(root / marker):
                raise NotAProject(str(root), marker)

    def analyze(self, path: str | Path, options: AnalysisOptions | None = None) -> AnalysisResult:
        """Run the full pipeline and emit each chapter to the sink as it is built."""
        root = Path(path).expanduser().resolve()
        options = options or AnalysisOptions()
        config = self._config_for(root)
        self.logger.info("Analyzing %s", root)

        self.validate(root)
        manifest = self.manifest_reader.read(root)
        env = self.env_reader.read(root, options)
        result = AnalysisResult(root=root, warnings=list(self.env_reader.warnings))

        try:
            records = self.scanner.scan(root, skip_hidden=config.skip_hidden)
            context = _RunContext(root, options, manifest, env, records)
            builders: List[Callable[[_RunContext, ArchitectConfig], ReportSection]] = [
                self._overview_section,
                self._structure_section,
                self._dependencies_section,
                self._testing_section,
                self._infrastructure_section,
            ]
            if options.summary:
                builders.extend([self._summary_section, self._security_section])
            for build in builders:
                section = build(context, config)
                section.emit(self.sink)
                result.sections.append(section)
        except Exception as exc:
            self.logger.debug("Analysis aborted", exc_info=True)
            raise AnalysisFailed(str(exc) or exc.__class__.__name__, result.sections) from exc

        self.logger.info("Emitted %d sections", len(result.sections))
        return result

    # ------------------------------------------------------------------
    # Chapters

    def _overview_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        section = ReportSection(SECTION_TITLES[0])
        manifest, env = ctx.manifest, ctx.env

        section.add_pair("Project Name", env.display("APP_NAME", "") or manifest.name or UNKNOWN)
        section.add_pair("Description", manifest.description or "No description provided")
        section.add_pair("Environment", env.display("APP_ENV", "Not specified"))
        section.add_pair("Debug Mode", "Enabled" if env.get("APP_DEBUG") == "true" else "Disabled")
        maintenance = self.filesystem.exists(ctx.root / MAINTENANCE_MARKER)
        section.add_pair("Maintenance Mode", "Enabled" if maintenance else "Disabled")
        section.add_pair("Project Size", format_size(sum(record.size for record in ctx.records)))

        total_lines = self.line_counter.count_source_lines(
            ctx.root,
            config.source_extension,
            config.exclude_paths,
            skip_hidden=config.skip_hidden,
        )
        section.add_pair("Lines of Code", f"{format_number(self.line_counter.kloc(total_lines))} KLOC")
        section.add_pair(
            "Activity Level",
            activity_label(self._recently_modified(ctx.records, config.activity_window_days)),
        )

        vcs = self._vcs_for(config)
        if vcs.has_metadata(ctx.root):
            section.add_heading("Git Information")
            _add_vcs_pairs(section, vcs.summarize(ctx.root))
        return section

    def _structure_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        section = ReportSection(SECTION_TITLES[1])
        for label, directory, recursive in STRUCTURE_COUNTS:
            section.add_pair(label, _count_files(ctx.records, directory, recursive))

        section.add_heading("Architectural Patterns")
        patterns = self.pattern_detector.detect(ctx.root)
        section.add_bullets(
            [f"{label} detected" for label in patterns] or ["No specific patterns detected"]
        )

        section.add_heading("Recent File Changes")
        recent = recently_modified_files(ctx.records, config.recent_files_limit)
        section.add_bullets(
            [
                f"{record.path} (modified {datetime.fromtimestamp(record.mtime):%Y-%m-%d})"
                for record in recent
            ]
        )
        return section

    def _dependencies_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        section = ReportSection(SECTION_TITLES[2])
        require = ctx.manifest.require
        framework = next(
            (require[name] for name in FRAMEWORK_PACKAGES if name in require), UNKNOWN
        )
        section.add_pair("Laravel Version", framework)
        section.add_pair("PHP Version", require.get(RUNTIME_PACKAGE, UNKNOWN))

        section.add_heading("Key Packages")
        section.add_bullets(
            [f"{package}: {version}" for package, version in key_packages(ctx.manifest)]
        )
        return section

    def _testing_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        facts = collect_testing_facts(ctx.root, ctx.manifest, ctx.records, self.filesystem)
        ctx.testing = facts

        section = ReportSection(SECTION_TITLES[3])
        section.add_pair("Total Tests", facts.total)
        section.add_pair("Feature Tests", facts.feature)
        section.add_pair("Unit Tests", facts.unit)
        section.add_pair("Test Suite", facts.framework)
        section.add_pair("Code Style", facts.code_style)
        section.add_pair("Static Analysis", "Configured" if facts.static_analysis else "Not configured")
        return section

    def _infrastructure_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        section = ReportSection(SECTION_TITLES[4])
        for label, key, default in INFRASTRUCTURE_FACTS:
            section.add_pair(label, ctx.env.display(key, default))

        section.add_heading("Detected Services")
        services = self.service_detector.detect(ctx.env)
        section.add_bullets(services or ["No third-party services detected"])
        return section

    def _summary_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        testing = ctx.testing or collect_testing_facts(
            ctx.root, ctx.manifest, ctx.records, self.filesystem
        )
        return build_executive_summary(testing, ctx.env)

    def _security_section(self, ctx: _RunContext, config: ArchitectConfig) -> ReportSection:
        return build_security_review(ctx.root, ctx.env, self.filesystem)

    # ------------------------------------------------------------------
    # Internals

    def _config_for(self, root: Path) -> ArchitectConfig:
        return self.config if self.config is not None else load_config(root)

    def _vcs_for(self, config: ArchitectConfig) -> VersionControlSummarizer:
        if self._vcs is None:
            self._vcs = VersionControlSummarizer(GitProvider(timeout=config.vcs_timeout))
        return self._vcs

    def _recently_modified(self, records: Sequence[FileRecord], window_days: int) -> int:
        cutoff = self.clock() - window_days * _SECONDS_PER_DAY
        return sum(1 for record in records if record.mtime > cutoff)


def recently_modified_files(records: Sequence[FileRecord], limit: int) -> List[FileRecord]:
    """Newest first; equal mtimes keep enumeration order."""
    return sorted(records, key=lambda record: record.mtime, reverse=True)[:limit]


def key_packages(manifest: Manifest, limit: int = KEY_PACKAGE_LIMIT) -> List[tuple[str, str]]:
    """First ``limit`` runtime requirements other than PHP and the framework itself."""
    skipped = {RUNTIME_PACKAGE, *FRAMEWORK_PACKAGES}
    packages = [
        (package, version)
        for package, version in manifest.require.items()
        if package not in skipped
    ]
    return packages[:limit]


def _count_files(records: Sequence[FileRecord], directory: str, recursive: bool) -> int:
    prefix = f"{directory}/"
    count = 0
    for record in records:
        if not record.path.startswith(prefix):
            continue
        if recursive or "/" not in record.path[len(prefix):]:
            count += 1
    return count


def _add_vcs_pairs(section: ReportSection, summary: VcsSummary) -> None:
    section.add_pair("Current Branch", summary.current_branch)
    section.add_pair("Last Commit", summary.last_commit_message)
    section.add_pair("Contributors", _or_unknown(summary.contributor_count))
    section.add_pair("Total Commits", _or_unknown(summary.total_commit_count))
    if summary.is_clean is None:
        state = UNKNOWN
    else:
        state = "Clean" if summary.is_clean else "Has Changes"
    section.add_pair("Working Directory", state)


def _or_unknown(value: Optional[int]) -> str:
    return UNKNOWN if value is None else str(value)


__all__ = [
    "ENTRY_SCRIPT",
    "INFRASTRUCTURE_FACTS",
    "ProjectAnalyzer",
    "SECTION_TITLES",
    "STRUCTURE_COUNTS",
    "key_packages",
    "recently_modified_files",
]
