"""Trivial warning sources: nothing configured, or a count handed in by the caller."""

from __future__ import annotations

from pathlib import Path

from orbitgate.analysis.base import AnalysisResult, Analyzer


class NullAnalyzer(Analyzer):
    """No static analysis configured; always reports zero warnings."""

    @property
    def name(self) -> str:
        return "null"

    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        return AnalysisResult()


class CountAnalyzer(Analyzer):
    """Reports a warning count measured by an earlier pipeline step."""

    def __init__(self, warning_count: int) -> None:
        if warning_count < 0:
            raise ValueError(f"warning count must be >= 0, got {warning_count}")
        self.warning_count = warning_count

    @property
    def name(self) -> str:
        return "count"

    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        return AnalysisResult(warning_count=self.warning_count)
