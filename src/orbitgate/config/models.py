"""Gate configuration schema (``gate.yaml``)."""

from __future__ import annotations

import sqlglot
from pydantic import BaseModel, Field, field_validator, model_validator

from orbitgate.analysis import available_analyzers


class AnalysisConfig(BaseModel):
    """Which warning source feeds the threshold, and over which paths."""

    tool: str = "null"
    paths: list[str] = []
    report: str | None = None
    warning_count: int | None = Field(None, alias="warningCount", ge=0)

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("tool")
    @classmethod
    def _known_tool(cls, value: str) -> str:
        if value not in available_analyzers():
            raise ValueError(
                f"unknown analysis tool '{value}' "
                f"(expected one of: {', '.join(available_analyzers())})"
            )
        return value

    @model_validator(mode="after")
    def _tool_options(self) -> AnalysisConfig:
        if self.tool == "eslint-report" and not self.report:
            raise ValueError("tool 'eslint-report' requires 'report'")
        if self.tool == "count" and self.warning_count is None:
            raise ValueError("tool 'count' requires 'warningCount'")
        return self


class GateConfig(BaseModel):
    """Complete gate configuration parsed from YAML."""

    files: list[str] = []
    warning_threshold: int = Field(0, alias="warningThreshold", ge=0)
    sql_dialect: str | None = Field(None, alias="sqlDialect")
    analysis: AnalysisConfig = AnalysisConfig()

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("sql_dialect")
    @classmethod
    def _known_dialect(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                sqlglot.Dialect.get_or_raise(value)
            except ValueError:
                raise ValueError(f"unknown SQL dialect '{value}'") from None
        return value
