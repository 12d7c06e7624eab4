"""CLI entrypoint for the architect command."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import AnalysisFailed, ManifestError, NotAProject
from .logging import configure_logging
from .models import AnalysisOptions
from .orchestrator import ProjectAnalyzer
from .report import ConsoleSink

TITLE = "The Story of Your Laravel Application"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="architect",
        description="Analyze and tell the story of your Laravel application.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the Laravel project (defaults to current directory).",
    )
    parser.add_argument(
        "--deep",
        action="store_true",
        help="Perform a deeper analysis (reserved).",
    )
    parser.add_argument(
        "--skip-env",
        action="store_true",
        help="Skip environment file analysis.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Append an executive summary and a security review.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an .architect.yml file (defaults to the project root).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for architect."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    root = Path(args.path).expanduser().resolve()
    config_path = Path(args.config) if args.config else root
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    sink = ConsoleSink()
    analyzer = ProjectAnalyzer(sink, config=config)
    options = AnalysisOptions(
        deep=bool(args.deep),
        skip_env=bool(args.skip_env),
        summary=bool(args.summary),
    )

    try:
        analyzer.validate(root)
    except NotAProject:
        parser.exit(1, "This doesn't seem to be a Laravel project!\n")

    sink.title(TITLE)
    try:
        result = analyzer.analyze(root, options)
    except ManifestError as exc:
        parser.exit(1, f"{exc}\n")
    except AnalysisFailed as exc:
        parser.exit(
            1,
            f"An error occurred during analysis: {exc}\nRun with --verbose for more details.\n",
        )

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    print()
    print("Analysis complete!")


if __name__ == "__main__":
    main(sys.argv[1:])
