"""Warning-source contract: the gate consumes counts, it does not lint."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from orbitgate.models.report import Diagnostic


class AnalyzerError(Exception):
    """Raised when an analyzer cannot produce a result at all."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)


@dataclass
class AnalysisResult:
    """Warnings and fatal errors reported by one static-analysis pass.

    ``fatal`` maps a root-relative path to the reason the tool could not
    analyse it; those files are treated like parse failures by the gate.
    """

    warning_count: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fatal: dict[str, str] = field(default_factory=dict)


class Analyzer(ABC):
    """A static-analysis collaborator."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        """Analyse *paths* (relative to *root*) and report warnings."""


def normalize_path(path: str) -> str:
    """Canonical relative form used to match analyzer output to requested paths."""
    return PurePath(os.path.normpath(path)).as_posix()


def relative_to_root(path: str, root: Path) -> str:
    """Express *path* relative to *root* when it lies beneath it."""
    candidate = Path(path)
    if not candidate.is_absolute():
        return normalize_path(path)
    try:
        return candidate.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return candidate.as_posix()


def is_within(path: str, scopes: list[str]) -> bool:
    """True if *path* equals one of *scopes* or sits below one of them."""
    parts = PurePath(normalize_path(path)).parts
    for scope in scopes:
        scope_norm = normalize_path(scope)
        if scope_norm == ".":
            return True
        scope_parts = PurePath(scope_norm).parts
        if parts[: len(scope_parts)] == scope_parts:
            return True
    return False
