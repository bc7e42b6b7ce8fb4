"""Gate config loader with position tracking for rich error reporting."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from orbitgate.config.models import GateConfig
from orbitgate.models.errors import ConfigResult, GateError, SourceSpan

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 1_000_000  # 1M characters
_MAX_DEPTH = 10

# Anchor definitions (&name) outside quoted strings, good-enough heuristic.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)


class ConfigSafetyError(Exception):
    """Raised when config YAML violates safety constraints.

    Distinct from parse errors: oversized documents, anchors and aliases.
    """


@dataclass
class SourceMap:
    """Maps config key paths (``analysis.tool``, ``files[2]``) to source positions."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    def nearest(self, path: str) -> SourceSpan | None:
        """Position of *path* or of its closest recorded ancestor."""
        while path:
            span = self._positions.get(path)
            if span is not None:
                return span
            cut = max(path.rfind("."), path.rfind("["))
            if cut <= 0:
                return None
            path = path[:cut]
        return None

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class GateConfigLoader:
    """Loads ``gate.yaml`` files into a validated :class:`GateConfig`.

    Problems are returned as structured errors, never raised.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.preserve_quotes = True
        self._yaml.max_depth = _MAX_DEPTH

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise ConfigSafetyError(
                f"config document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise ConfigSafetyError("YAML anchors/aliases are not supported in gate configs")

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> tuple[GateConfig | None, ConfigResult]:
        """Load a config file."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except FileNotFoundError:
            return None, _failed("CONFIG_NOT_FOUND", f"Config file not found: {path}")
        except (OSError, UnicodeDecodeError) as exc:
            return None, _failed("CONFIG_READ_ERROR", f"Cannot read config file {path}: {exc}")
        return self.load_string(content, filename=str(path))

    def load_string(
        self, content: str, filename: str = "<string>"
    ) -> tuple[GateConfig | None, ConfigResult]:
        """Load a config from a YAML string."""
        try:
            self._check_yaml_safety(content)
            data = self._yaml.load(content)
        except ConfigSafetyError as exc:
            return None, _failed("CONFIG_SAFETY_ERROR", str(exc))
        except MarkedYAMLError as exc:
            span = None
            if exc.problem_mark is not None:
                span = SourceSpan(
                    file=filename,
                    line=exc.problem_mark.line + 1,
                    column=exc.problem_mark.column + 1,
                )
            message = exc.problem or str(exc)
            return None, _failed("CONFIG_PARSE_ERROR", f"Invalid YAML: {message}", span=span)
        except YAMLError as exc:
            return None, _failed("CONFIG_PARSE_ERROR", f"Invalid YAML: {exc}")

        if data is None:
            return GateConfig(), ConfigResult(valid=True)
        if not isinstance(data, dict):
            return None, _failed(
                "CONFIG_PARSE_ERROR",
                "Gate config must be a YAML mapping, not a list or scalar",
            )

        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        try:
            config = GateConfig.model_validate(_to_plain(data))
        except ValidationError as exc:
            return None, ConfigResult(
                valid=False, errors=_validation_errors(exc, source_map)
            )
        return config, ConfigResult(valid=True)

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    key_positions = data.lc.key(key)
                    if key_positions:
                        line, col = key_positions
                        source_map.add(
                            key_path, SourceSpan(file=filename, line=line + 1, column=col + 1)
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}[{i}]"
                try:
                    item_pos = data.lc.item(i)
                    if item_pos:
                        line, col = item_pos
                        source_map.add(
                            item_path, SourceSpan(file=filename, line=line + 1, column=col + 1)
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, filename, item_path, source_map)


def _failed(code: str, message: str, span: SourceSpan | None = None) -> ConfigResult:
    return ConfigResult(valid=False, errors=[GateError(code=code, message=message, span=span)])


def _loc_to_path(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _validation_errors(exc: ValidationError, source_map: SourceMap) -> list[GateError]:
    errors: list[GateError] = []
    for err in exc.errors():
        path = _loc_to_path(err["loc"])
        code = "UNKNOWN_CONFIG_KEY" if err["type"] == "extra_forbidden" else "INVALID_CONFIG_VALUE"
        message = err["msg"].removeprefix("Value error, ")
        errors.append(
            GateError(
                code=code,
                message=f"{path}: {message}" if path else message,
                path=path or None,
                span=source_map.nearest(path) if path else None,
            )
        )
    return errors


def _to_plain(data: Any) -> Any:
    """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(item) for item in data]
    if isinstance(data, str):
        return str(data)
    return data
