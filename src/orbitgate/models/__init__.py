"""Pydantic domain models for orbitgate."""

from orbitgate.models.errors import ConfigResult, GateError, SourceSpan
from orbitgate.models.report import CheckStage, Diagnostic, FileCheckResult, ValidationReport

__all__ = [
    "CheckStage",
    "ConfigResult",
    "Diagnostic",
    "FileCheckResult",
    "GateError",
    "SourceSpan",
    "ValidationReport",
]
