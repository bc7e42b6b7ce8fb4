"""Command-line entry point: ``orbitgate [FILES...]``.

Exit status is 0 when the gate passes, 1 when it fails and 2 for usage or
configuration errors.  The report goes to stdout, logging to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from orbitgate import __version__
from orbitgate.analysis import Analyzer, available_analyzers, get_analyzer
from orbitgate.config import GateConfig, GateConfigLoader
from orbitgate.models.errors import ConfigResult
from orbitgate.service.gate import ValidationGate
from orbitgate.service.render import render_json, render_text
from orbitgate.settings import Settings
from orbitgate.syntax import SyntaxChecker
from orbitgate.syntax.sql import SQLChecker

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

logger = logging.getLogger("orbitgate.cli")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbitgate",
        description="Syntax-check source files and enforce a static-analysis warning threshold.",
    )
    parser.add_argument("files", nargs="*", help="Files to check (replaces the configured list)")
    parser.add_argument("-c", "--config",
                        help="Gate config file (default: $GATE_CONFIG or gate.yaml)")
    parser.add_argument("--root", default=".", help="Directory the paths are relative to")
    parser.add_argument("--max-warnings", type=_non_negative_int,
                        help="Warning threshold (overrides config and environment)")
    parser.add_argument("--analyzer", choices=available_analyzers(),
                        help="Warning source (overrides config and environment)")
    parser.add_argument("--analysis-path", action="append", default=[],
                        help="Path handed to the analyzer; repeatable (default: the file list)")
    parser.add_argument("--eslint-report", help="ESLint JSON report to read warnings from")
    parser.add_argument("--warning-count", type=_non_negative_int,
                        help="Warning count measured by an earlier step")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Report format")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="List every analyzer diagnostic in the text report")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_config_errors(result: ConfigResult) -> None:
    for error in result.errors:
        if error.span is not None:
            where = f"{error.span.file}:{error.span.line}:{error.span.column}: "
        else:
            where = ""
        print(f"{where}{error.code}: {error.message}", file=sys.stderr)


def _load_config(args: argparse.Namespace, settings: Settings) -> GateConfig | None:
    """Load the gate config; ``None`` means a configuration error was printed."""
    explicit = args.config is not None
    path = Path(args.config if explicit else settings.gate_config)
    if not explicit and not path.exists():
        logger.debug("No gate config at %s; using defaults", path)
        return GateConfig()
    config, result = GateConfigLoader().load(path)
    if not result.valid:
        _print_config_errors(result)
        return None
    logger.debug("Loaded gate config from %s", path)
    return config


def _resolve_analyzer(
    args: argparse.Namespace, settings: Settings, config: GateConfig
) -> Analyzer:
    name = args.analyzer or settings.analyzer
    if name is None:
        if args.warning_count is not None:
            name = "count"
        elif args.eslint_report:
            name = "eslint-report"
        else:
            name = config.analysis.tool
    warning_count = (
        args.warning_count if args.warning_count is not None else config.analysis.warning_count
    )
    return get_analyzer(
        name,
        report=args.eslint_report or config.analysis.report,
        warning_count=warning_count,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the gate from the command line and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"orbitgate: invalid environment settings: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("orbitgate v%s", __version__)

    config = _load_config(args, settings)
    if config is None:
        return EXIT_USAGE

    try:
        analyzer = _resolve_analyzer(args, settings, config)
    except ValueError as exc:
        print(f"orbitgate: {exc}", file=sys.stderr)
        return EXIT_USAGE

    threshold = args.max_warnings
    if threshold is None:
        threshold = settings.warning_threshold
    if threshold is None:
        threshold = config.warning_threshold
    if threshold < 0:
        print(f"orbitgate: warning threshold must be >= 0, got {threshold}", file=sys.stderr)
        return EXIT_USAGE

    checkers: list[SyntaxChecker] = []
    if config.sql_dialect:
        checkers.append(SQLChecker(config.sql_dialect))

    files = args.files or config.files
    if not files:
        logger.warning("Validation gate invoked with no files; passing vacuously")

    gate = ValidationGate(analyzer=analyzer, checkers=checkers)
    report = gate.validate(
        files,
        threshold,
        root=args.root,
        analysis_paths=args.analysis_path or config.analysis.paths or None,
    )

    if args.format == "json":
        sys.stdout.write(render_json(report))
    else:
        sys.stdout.write(render_text(report, verbose=args.verbose))
    return EXIT_PASSED if report.passed else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
