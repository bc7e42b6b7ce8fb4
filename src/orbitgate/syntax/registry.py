"""Checker registry: maps file suffixes to syntax checker implementations."""

from __future__ import annotations

from pathlib import PurePath

from orbitgate.syntax.base import SyntaxChecker


class UnsupportedSourceError(Exception):
    """Raised when no checker is registered for a file's suffix."""

    def __init__(self, path: str, suffix: str) -> None:
        self.path = path
        self.suffix = suffix
        label = f"'{suffix}'" if suffix else "extension-less"
        super().__init__(f"no syntax checker for {label} files")


class CheckerRegistry:
    """Registry for syntax checker plugins, keyed by lower-case suffix."""

    _checkers: dict[str, type[SyntaxChecker]] = {}

    @classmethod
    def register(cls, checker_class: type[SyntaxChecker]) -> type[SyntaxChecker]:
        """Register a checker class for all of its suffixes. Can be used as a decorator."""
        instance = checker_class()
        for suffix in instance.suffixes:
            cls._checkers[suffix.lower()] = checker_class
        return checker_class

    @classmethod
    def get(cls, path: str) -> SyntaxChecker:
        """Return a checker instance for *path*, chosen by its suffix."""
        suffix = PurePath(path).suffix.lower()
        if suffix not in cls._checkers:
            raise UnsupportedSourceError(path, suffix)
        return cls._checkers[suffix]()

    @classmethod
    def available(cls) -> list[str]:
        """List registered suffixes."""
        return sorted(cls._checkers.keys())
