"""In-process Python analysis with pyflakes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pyflakes import api as pyflakes_api

from orbitgate.analysis.base import AnalysisResult, Analyzer, relative_to_root
from orbitgate.models.report import Diagnostic

logger = logging.getLogger("orbitgate.analysis")

_PYTHON_SUFFIXES = (".py", ".pyi")


class _CollectingReporter:
    """Duck-typed pyflakes reporter that records messages instead of printing."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self.diagnostics: list[Diagnostic] = []
        self.fatal: dict[str, str] = {}

    def unexpectedError(self, filename: str, msg: str) -> None:  # noqa: N802
        path = relative_to_root(filename, self._root)
        self.fatal[path] = str(msg)
        self.diagnostics.append(Diagnostic(path=path, message=str(msg), fatal=True))

    def syntaxError(  # noqa: N802
        self, filename: str, msg: str, lineno: int | None, offset: int | None, text: str | None
    ) -> None:
        path = relative_to_root(filename, self._root)
        where = f" (line {lineno})" if lineno is not None else ""
        self.fatal[path] = f"{msg}{where}"
        self.diagnostics.append(
            Diagnostic(path=path, line=lineno, column=offset, message=str(msg), fatal=True)
        )

    def flake(self, message: Any) -> None:
        self.diagnostics.append(
            Diagnostic(
                path=relative_to_root(message.filename, self._root),
                line=message.lineno,
                column=message.col + 1,
                message=message.message % message.message_args,
                code=type(message).__name__,
            )
        )


class PyflakesAnalyzer(Analyzer):
    """Counts pyflakes messages over Python files; directories are walked."""

    @property
    def name(self) -> str:
        return "pyflakes"

    def _source_files(
        self, paths: list[str], root: Path, reporter: _CollectingReporter
    ) -> list[str]:
        files: list[str] = []
        for raw in paths:
            target = root / raw
            if target.is_dir():
                files.extend(sorted(pyflakes_api.iterSourceCode([str(target)])))
            elif not target.exists():
                if raw.endswith(_PYTHON_SUFFIXES):
                    reporter.unexpectedError(str(target), "file not found")
            elif raw.endswith(_PYTHON_SUFFIXES):
                files.append(str(target))
        # de-duplicate while keeping order, overlapping scopes are common
        return list(dict.fromkeys(files))

    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        # pyflakes reports the filenames it was given; absolute ones rebase cleanly.
        root = root.resolve()
        reporter = _CollectingReporter(root)
        for filename in self._source_files(paths, root, reporter):
            pyflakes_api.checkPath(filename, reporter)
        warnings = [d for d in reporter.diagnostics if not d.fatal]
        logger.debug("pyflakes: %d warning(s), %d fatal", len(warnings), len(reporter.fatal))
        return AnalysisResult(
            warning_count=len(warnings),
            diagnostics=reporter.diagnostics,
            fatal=reporter.fatal,
        )
