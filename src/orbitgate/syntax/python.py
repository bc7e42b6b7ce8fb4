"""Python syntax checker: compiles to an AST only, nothing is executed."""

from __future__ import annotations

import ast

from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry


@CheckerRegistry.register
class PythonChecker(SyntaxChecker):
    @property
    def name(self) -> str:
        return "python"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".py", ".pyi")

    def check_source(self, source: bytes, path: str) -> None:
        # Raw bytes so ast honours PEP 263 coding cookies and BOMs.
        try:
            ast.parse(source, filename=path)
        except SyntaxError as exc:
            raise SourceSyntaxError(exc.msg, exc.lineno, exc.offset) from exc
        except ValueError as exc:
            # null bytes, undecodable source
            raise SourceSyntaxError(str(exc)) from exc
