"""SQL syntax checker using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import ParseError, SqlglotError

from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry


@CheckerRegistry.register
class SQLChecker(SyntaxChecker):
    """Parses SQL scripts; ``dialect`` is any sqlglot dialect name (generic SQL if unset)."""

    def __init__(self, dialect: str | None = None) -> None:
        self.dialect = dialect

    @property
    def name(self) -> str:
        return "sql"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".sql",)

    def check_source(self, source: bytes, path: str) -> None:
        text = self.decode(source)
        try:
            sqlglot.transpile(text, read=self.dialect)
        except ParseError as exc:
            first = exc.errors[0] if exc.errors else {}
            raise SourceSyntaxError(
                first.get("description") or str(exc),
                first.get("line"),
                first.get("col"),
            ) from exc
        except SqlglotError as exc:
            raise SourceSyntaxError(str(exc)) from exc
