"""Abstract base for per-language syntax checkers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SourceSyntaxError(Exception):
    """Raised by a checker when a source file is not well formed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class SyntaxChecker(ABC):
    """Parses a source file and discards the result.

    Checkers must never execute the code they parse.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def suffixes(self) -> tuple[str, ...]: ...

    @abstractmethod
    def check_source(self, source: bytes, path: str) -> None:
        """Raise ``SourceSyntaxError`` if *source* does not parse."""

    @staticmethod
    def decode(source: bytes) -> str:
        """Decode text formats that have no encoding declaration of their own."""
        try:
            return source.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise SourceSyntaxError(f"cannot decode file as UTF-8: {exc.reason}") from exc
