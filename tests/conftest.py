"""Shared test fixtures for orbitgate."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from orbitgate.analysis import AnalysisResult, Analyzer
from orbitgate.config import GateConfigLoader
from orbitgate.service.gate import ValidationGate

VALID_PY = "import os\n\n\ndef cwd() -> str:\n    return os.getcwd()\n"
BROKEN_PY = "def broken(:\n    pass\n"
VALID_JS = "const x = 1;\nmodule.exports = { x };\n"
BROKEN_JS = "function (\n"

SAMPLE_CONFIG_YAML = """\
files:
  - run.js
  - src/satellite.js
  - src/iridium.js
  - src/utils.js
warningThreshold: 25
analysis:
  tool: eslint-report
  paths:
    - src
  report: eslint-report.json
"""


class StubAnalyzer(Analyzer):
    """Returns a canned result and records what it was asked to analyse."""

    def __init__(
        self, warning_count: int = 0, fatal: dict[str, str] | None = None
    ) -> None:
        self.warning_count = warning_count
        self.fatal = fatal or {}
        self.calls: list[list[str]] = []

    @property
    def name(self) -> str:
        return "stub"

    def analyze(self, paths: list[str], root: Path) -> AnalysisResult:
        self.calls.append(list(paths))
        return AnalysisResult(warning_count=self.warning_count, fatal=dict(self.fatal))


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Write ``{relative path: content}`` under ``tmp_path`` and return the root."""

    def _write(files: dict[str, str | bytes]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def gate() -> ValidationGate:
    return ValidationGate()


@pytest.fixture
def config_loader() -> GateConfigLoader:
    return GateConfigLoader()


def eslint_report(entries: dict[str, list[dict]], root: Path | None = None) -> str:
    """Build an ``eslint -f json`` style report; paths are made absolute under *root*."""
    report = []
    for path, messages in entries.items():
        file_path = str(root / path) if root is not None else path
        report.append(
            {
                "filePath": file_path,
                "messages": messages,
                "errorCount": sum(1 for m in messages if m.get("severity") == 2),
                "warningCount": sum(1 for m in messages if m.get("severity") == 1),
            }
        )
    return json.dumps(report)


def eslint_warning(line: int = 1, rule: str = "no-unused-vars") -> dict:
    return {"ruleId": rule, "severity": 1, "message": f"{rule} warning", "line": line, "column": 1}
