"""Static-analysis warning sources consumed by the validation gate."""

from __future__ import annotations

from typing import Any

from orbitgate.analysis.base import AnalysisResult, Analyzer, AnalyzerError
from orbitgate.analysis.eslint import EslintReportAnalyzer
from orbitgate.analysis.flakes import PyflakesAnalyzer
from orbitgate.analysis.simple import CountAnalyzer, NullAnalyzer

_FACTORIES: dict[str, Any] = {
    "null": lambda **_: NullAnalyzer(),
    "pyflakes": lambda **_: PyflakesAnalyzer(),
    "eslint-report": lambda report=None, **_: _eslint(report),
    "count": lambda warning_count=None, **_: _count(warning_count),
}


def _eslint(report: str | None) -> EslintReportAnalyzer:
    if not report:
        raise ValueError("analyzer 'eslint-report' needs a report file")
    return EslintReportAnalyzer(report)


def _count(warning_count: int | None) -> CountAnalyzer:
    if warning_count is None:
        raise ValueError("analyzer 'count' needs a warning count")
    return CountAnalyzer(warning_count)


def available_analyzers() -> list[str]:
    return sorted(_FACTORIES)


def get_analyzer(name: str, **options: Any) -> Analyzer:
    """Build an analyzer by name.

    Recognised options: ``report`` (eslint-report) and ``warning_count`` (count).
    """
    factory = _FACTORIES.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown analyzer '{name}'. Available: {', '.join(available_analyzers())}"
        )
    return factory(**options)


__all__ = [
    "AnalysisResult",
    "Analyzer",
    "AnalyzerError",
    "CountAnalyzer",
    "EslintReportAnalyzer",
    "NullAnalyzer",
    "PyflakesAnalyzer",
    "available_analyzers",
    "get_analyzer",
]
