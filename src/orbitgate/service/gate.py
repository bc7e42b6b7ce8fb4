"""The validation gate: per-file syntax checks plus a warning threshold."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from orbitgate.analysis import AnalysisResult, Analyzer, AnalyzerError, NullAnalyzer
from orbitgate.analysis.base import normalize_path
from orbitgate.models.report import CheckStage, FileCheckResult, ValidationReport
from orbitgate.syntax import (
    CheckerRegistry,
    SourceSyntaxError,
    SyntaxChecker,
    UnsupportedSourceError,
)

logger = logging.getLogger("orbitgate.gate")


class ValidationGate:
    """Runs the syntax stage and the analysis stage and merges them into one report.

    Checkers come from :class:`CheckerRegistry`; *checkers* overrides the
    registry for their suffixes (e.g. a ``SQLChecker`` bound to a dialect).
    """

    def __init__(
        self,
        analyzer: Analyzer | None = None,
        checkers: Sequence[SyntaxChecker] = (),
    ) -> None:
        self._analyzer = analyzer or NullAnalyzer()
        self._overrides: dict[str, SyntaxChecker] = {
            suffix.lower(): checker for checker in checkers for suffix in checker.suffixes
        }

    def _checker_for(self, path: str) -> SyntaxChecker:
        suffix = Path(path).suffix.lower()
        if suffix in self._overrides:
            return self._overrides[suffix]
        return CheckerRegistry.get(path)

    # -- stage 1: syntax -----------------------------------------------------

    def check_file(self, path: str, root: Path) -> FileCheckResult:
        """Parse one file without executing it.  Never raises."""
        target = root / path
        try:
            if not target.exists():
                return FileCheckResult.failure(path, "file not found")
            if target.is_dir():
                return FileCheckResult.failure(path, "is a directory, not a source file")
            checker = self._checker_for(path)
            source = target.read_bytes()
            checker.check_source(source, path)
        except UnsupportedSourceError as exc:
            return FileCheckResult.failure(path, str(exc))
        except SourceSyntaxError as exc:
            return FileCheckResult.failure(path, exc.describe())
        except OSError as exc:
            return FileCheckResult.failure(path, f"cannot read file: {exc.strerror or exc}")
        except Exception as exc:
            # Parser bugs still count against this file only.
            logger.exception("Unexpected error while checking %s", path)
            return FileCheckResult.failure(path, f"{type(exc).__name__}: {exc}")
        return FileCheckResult.success(path)

    # -- stage 2: analysis ---------------------------------------------------

    def _run_analyzer(
        self, paths: list[str], root: Path
    ) -> tuple[AnalysisResult, list[FileCheckResult]]:
        try:
            return self._analyzer.analyze(paths, root), []
        except AnalyzerError as exc:
            logger.warning("Analyzer %s failed: %s", self._analyzer.name, exc)
            source = exc.source or f"<{self._analyzer.name}>"
            return AnalysisResult(), [
                FileCheckResult.failure(source, str(exc), stage=CheckStage.ANALYSIS)
            ]

    # -- public API ----------------------------------------------------------

    def validate(
        self,
        file_paths: Sequence[str],
        warning_threshold: int,
        root: str | Path = ".",
        analysis_paths: Sequence[str] | None = None,
    ) -> ValidationReport:
        """Check every file in order, then compare the warning count to the threshold.

        *analysis_paths* is the set handed to the analyzer; it defaults to
        *file_paths*.  An empty *file_paths* is a vacuous pass.
        """
        if warning_threshold < 0:
            raise ValueError(f"warning_threshold must be >= 0, got {warning_threshold}")
        root = Path(root)
        paths = list(file_paths)
        if not paths:
            logger.info("No files to validate; gate passes vacuously")
            return ValidationReport(
                warning_threshold=warning_threshold, analyzer=self._analyzer.name
            )

        results: list[FileCheckResult] = []
        for path in paths:
            result = self.check_file(path, root)
            if result.ok:
                logger.debug("OK: %s", path)
            else:
                logger.warning("FAILED: %s - %s", path, result.error_message)
            results.append(result)

        scope = list(analysis_paths) if analysis_paths else paths
        analysis, analysis_failures = self._run_analyzer(scope, root)

        # Fatal analysis errors: attach to requested files, keep the rest apart.
        requested = {normalize_path(p) for p in paths}
        fatal = {normalize_path(p): msg for p, msg in analysis.fatal.items()}
        for i, result in enumerate(results):
            message = fatal.get(normalize_path(result.path))
            if message is not None and result.ok:
                results[i] = FileCheckResult.failure(
                    result.path, message, stage=CheckStage.ANALYSIS
                )
        for path, message in analysis.fatal.items():
            if normalize_path(path) not in requested:
                analysis_failures.append(
                    FileCheckResult.failure(path, message, stage=CheckStage.ANALYSIS)
                )

        report = ValidationReport(
            results=results,
            warning_count=analysis.warning_count,
            warning_threshold=warning_threshold,
            analysis_failures=analysis_failures,
            diagnostics=analysis.diagnostics,
            analyzer=self._analyzer.name,
        )
        logger.info(
            "Gate %s: %d file(s), %d failed, %d warning(s) (threshold %d)",
            "passed" if report.passed else "failed",
            len(results),
            len(report.failed_paths),
            report.warning_count,
            warning_threshold,
        )
        return report


def validate(
    file_paths: Sequence[str],
    warning_threshold: int,
    *,
    root: str | Path = ".",
    analyzer: Analyzer | None = None,
    analysis_paths: Sequence[str] | None = None,
) -> ValidationReport:
    """Run the validation gate once with a default checker set."""
    gate = ValidationGate(analyzer=analyzer)
    return gate.validate(
        file_paths, warning_threshold, root=root, analysis_paths=analysis_paths
    )
