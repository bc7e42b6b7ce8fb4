"""Structured configuration errors with YAML source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in a gate config file for error reporting."""

    file: str
    line: int
    column: int


class GateError(BaseModel):
    """A structured error with optional source position."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class ConfigResult(BaseModel):
    """Result of loading and validating a gate configuration."""

    valid: bool
    errors: list[GateError] = []
