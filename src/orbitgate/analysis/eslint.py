"""Consume the JSON report written by an external ``eslint -f json`` step."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from orbitgate.analysis.base import (
    AnalysisResult,
    Analyzer,
    AnalyzerError,
    is_within,
    relative_to_root,
)
from orbitgate.models.report import Diagnostic

logger = logging.getLogger("orbitgate.analysis")


class EslintMessage(BaseModel):
    rule_id: str | None = Field(None, alias="ruleId")
    severity: int = 1
    message: str
    line: int | None = None
    column: int | None = None
    fatal: bool = False

    model_config = {"populate_by_name": True}


class EslintFileResult(BaseModel):
    file_path: str = Field(alias="filePath")
    messages: list[EslintMessage] = []

    model_config = {"populate_by_name": True}


_REPORT_ADAPTER = TypeAdapter(list[EslintFileResult])


class EslintReportAnalyzer(Analyzer):
    """Reads an ESLint JSON report.

    Fatal messages (parse errors) mark their file as failed; every other
    message, warning or error severity, counts toward the threshold.
    When *scopes* is empty every file in the report is counted.
    """

    def __init__(self, report: str | Path) -> None:
        self.report = Path(report)

    @property
    def name(self) -> str:
        return "eslint-report"

    def _load(self, root: Path) -> list[EslintFileResult]:
        report_path = self.report if self.report.is_absolute() else root / self.report
        try:
            raw = report_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise AnalyzerError(
                f"ESLint report not found: {self.report}", source=str(self.report)
            ) from None
        except OSError as exc:
            raise AnalyzerError(
                f"cannot read ESLint report {self.report}: {exc.strerror or exc}",
                source=str(self.report),
            ) from exc
        try:
            return _REPORT_ADAPTER.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise AnalyzerError(
                f"malformed ESLint report {self.report}: {exc}", source=str(self.report)
            ) from exc

    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        result = AnalysisResult()
        for entry in self._load(root):
            path = relative_to_root(entry.file_path, root)
            if paths and not is_within(path, paths):
                continue
            for msg in entry.messages:
                diagnostic = Diagnostic(
                    path=path,
                    line=msg.line,
                    column=msg.column,
                    message=msg.message,
                    code=msg.rule_id,
                    fatal=msg.fatal,
                )
                result.diagnostics.append(diagnostic)
                if msg.fatal:
                    where = f" (line {msg.line})" if msg.line is not None else ""
                    result.fatal.setdefault(path, f"{msg.message}{where}")
                else:
                    result.warning_count += 1
        logger.debug(
            "eslint report %s: %d warning(s), %d fatal",
            self.report, result.warning_count, len(result.fatal),
        )
        return result
