"""JSON syntax checker."""

from __future__ import annotations

import json

from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry


@CheckerRegistry.register
class JSONChecker(SyntaxChecker):
    @property
    def name(self) -> str:
        return "json"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".json",)

    def check_source(self, source: bytes, path: str) -> None:
        text = self.decode(source)
        try:
            json.loads(text)
        except json.JSONDecodeError as exc:
            raise SourceSyntaxError(exc.msg, exc.lineno, exc.colno) from exc
