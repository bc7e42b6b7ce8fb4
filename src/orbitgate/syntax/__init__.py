"""Per-language syntax checkers for the validation gate."""

# Import checkers to trigger registration
import orbitgate.syntax.javascript as _javascript  # noqa: F401
import orbitgate.syntax.json_doc as _json_doc  # noqa: F401
import orbitgate.syntax.python as _python  # noqa: F401
import orbitgate.syntax.sql as _sql  # noqa: F401
import orbitgate.syntax.yaml_doc as _yaml_doc  # noqa: F401
from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry, UnsupportedSourceError

__all__ = [
    "CheckerRegistry",
    "SourceSyntaxError",
    "SyntaxChecker",
    "UnsupportedSourceError",
]
