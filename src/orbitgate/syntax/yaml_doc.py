"""YAML syntax checker (workflow files, gate configs, fixtures)."""

from __future__ import annotations

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from orbitgate.syntax.base import SourceSyntaxError, SyntaxChecker
from orbitgate.syntax.registry import CheckerRegistry


@CheckerRegistry.register
class YAMLChecker(SyntaxChecker):
    """Parses every document in the stream with the round-trip loader."""

    @property
    def name(self) -> str:
        return "yaml"

    @property
    def suffixes(self) -> tuple[str, ...]:
        return (".yaml", ".yml")

    def check_source(self, source: bytes, path: str) -> None:
        text = self.decode(source)
        yaml = YAML()
        try:
            for _document in yaml.load_all(text):
                pass
        except MarkedYAMLError as exc:
            mark = exc.problem_mark
            message = exc.problem or exc.context or "invalid YAML"
            if mark is None:
                raise SourceSyntaxError(message) from exc
            raise SourceSyntaxError(message, mark.line + 1, mark.column + 1) from exc
        except YAMLError as exc:
            raise SourceSyntaxError(str(exc)) from exc
