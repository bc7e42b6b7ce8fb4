"""Validation report types: per-file outcomes and the aggregate gate result."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, computed_field, model_validator


class CheckStage(StrEnum):
    SYNTAX = "syntax"
    ANALYSIS = "analysis"


class FileCheckResult(BaseModel):
    """Outcome of checking one file.  ``ok`` iff there is no error message."""

    path: str
    ok: bool
    error_message: str | None = None
    stage: CheckStage = CheckStage.SYNTAX

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _ok_matches_message(self) -> FileCheckResult:
        if self.ok and self.error_message is not None:
            raise ValueError("a passing file check cannot carry an error message")
        if not self.ok and self.error_message is None:
            raise ValueError("a failing file check needs an error message")
        return self

    @classmethod
    def success(cls, path: str) -> FileCheckResult:
        return cls(path=path, ok=True)

    @classmethod
    def failure(
        cls, path: str, message: str, stage: CheckStage = CheckStage.SYNTAX
    ) -> FileCheckResult:
        return cls(path=path, ok=False, error_message=message, stage=stage)


class Diagnostic(BaseModel):
    """A single static-analysis message."""

    path: str
    line: int | None = None
    column: int | None = None
    message: str
    code: str | None = None
    fatal: bool = False

    model_config = {"frozen": True}

    def location(self) -> str:
        parts = [self.path]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class ValidationReport(BaseModel):
    """Aggregate result of one gate run.

    ``results`` mirrors the requested path list one-to-one and in order.
    Fatal analysis errors on files outside that list are kept apart in
    ``analysis_failures`` so the ordering never shifts.
    """

    results: list[FileCheckResult] = []
    warning_count: int = 0
    warning_threshold: int = 0
    analysis_failures: list[FileCheckResult] = []
    diagnostics: list[Diagnostic] = []
    analyzer: str = "null"

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return (
            all(r.ok for r in self.results)
            and not self.analysis_failures
            and not self.threshold_exceeded
        )

    @property
    def threshold_exceeded(self) -> bool:
        return self.warning_count > self.warning_threshold

    @property
    def syntax_failures(self) -> list[FileCheckResult]:
        return [r for r in self.results if not r.ok and r.stage == CheckStage.SYNTAX]

    @property
    def failed_paths(self) -> list[str]:
        failed = [r.path for r in self.results if not r.ok]
        failed.extend(r.path for r in self.analysis_failures)
        return failed
