"""JavaScript syntax checker backed by the esprima parser."""

from __future__ import annotations

import esprima
from esprima.error_handler import Error as EsprimaError

from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry

# esprima prefixes its messages with "Line N: "; the line is reported separately.
_LINE_PREFIX = "Line "


@CheckerRegistry.register
class JavaScriptChecker(SyntaxChecker):
    """Parses ``.js``/``.cjs`` as scripts and ``.mjs`` as ES modules."""

    @property
    def name(self) -> str:
        return "javascript"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".js", ".cjs", ".mjs")

    def check_source(self, source: bytes, path: str) -> None:
        text = self.decode(source)
        if text.startswith("#!"):
            # Keep line numbers stable while dropping a node shebang.
            text = "//" + text[2:]
        try:
            if path.lower().endswith(".mjs"):
                esprima.parseModule(text)
            else:
                esprima.parseScript(text)
        except EsprimaError as exc:
            raise SourceSyntaxError(
                _strip_line_prefix(getattr(exc, "description", None) or str(exc)),
                getattr(exc, "lineNumber", None),
                getattr(exc, "column", None),
            ) from exc


def _strip_line_prefix(message: str) -> str:
    if message.startswith(_LINE_PREFIX) and ": " in message:
        return message.split(": ", 1)[1]
    return message
