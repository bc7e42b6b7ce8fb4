"""End-to-end tests for the ``orbitgate`` command line."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from orbitgate.cli import EXIT_FAILED, EXIT_PASSED, EXIT_USAGE, main
from tests.conftest import (
    BROKEN_JS,
    SAMPLE_CONFIG_YAML,
    VALID_JS,
    VALID_PY,
    eslint_report,
    eslint_warning,
)

WriteTree = Callable[[dict[str, str | bytes]], Path]


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every CLI test inside tmp_path with no gate settings in the environment."""
    for var in ("GATE_CONFIG", "WARNING_THRESHOLD", "ANALYZER", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def tracker_repo(write_tree: WriteTree, tmp_path: Path) -> Path:
    """A scraper checkout with the sample gate config and an ESLint report (21 warnings)."""
    write_tree(
        {
            "gate.yaml": SAMPLE_CONFIG_YAML,
            "run.js": VALID_JS,
            "src/satellite.js": VALID_JS,
            "src/iridium.js": VALID_JS,
            "src/utils.js": VALID_JS,
        }
    )
    report = eslint_report(
        {
            "src/satellite.js": [eslint_warning(i) for i in range(1, 11)],
            "src/iridium.js": [eslint_warning(i) for i in range(1, 12)],
        },
        root=tmp_path,
    )
    write_tree({"eslint-report.json": report})
    return tmp_path


class TestConfiguredRun:
    def test_passes(self, tracker_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_PASSED
        out = capsys.readouterr().out
        assert "OK: run.js" in out
        assert "OK: src/utils.js" in out
        assert "Warnings: 21 (threshold 25) - ok" in out
        assert out.rstrip().endswith("All syntax validation tests passed!")

    def test_broken_file_fails(
        self, tracker_repo: Path, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"src/utils.js": BROKEN_JS})
        assert main([]) == EXIT_FAILED
        out = capsys.readouterr().out
        assert "FAILED: src/utils.js - " in out
        assert out.rstrip().endswith("Some tests failed")

    def test_cli_threshold_overrides_config(
        self, tracker_repo: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--max-warnings", "20"]) == EXIT_FAILED
        assert "Warnings: 21 (threshold 20) - threshold exceeded" in capsys.readouterr().out

    def test_env_threshold_overrides_config(
        self, tracker_repo: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WARNING_THRESHOLD", "20")
        assert main([]) == EXIT_FAILED

    def test_missing_eslint_report(
        self, tracker_repo: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tracker_repo / "eslint-report.json").unlink()
        assert main([]) == EXIT_FAILED
        assert "FAILED: eslint-report.json - ESLint report not found" in capsys.readouterr().out

    def test_json_output(self, tracker_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--format", "json"]) == EXIT_PASSED
        data = json.loads(capsys.readouterr().out)
        assert data["passed"] is True
        assert data["analyzer"] == "eslint-report"
        assert [r["path"] for r in data["results"]][0] == "run.js"


class TestAdHocRun:
    def test_positional_files_and_missing_file(
        self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"a.js": VALID_JS})
        assert main(["a.js", "missing.js"]) == EXIT_FAILED
        lines = capsys.readouterr().out.splitlines()
        assert lines[2:4] == ["OK: a.js", "FAILED: missing.js - file not found"]

    def test_warning_count_over_threshold(
        self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"a.js": VALID_JS, "b.js": VALID_JS})
        code = main(["a.js", "b.js", "--warning-count", "26", "--max-warnings", "25"])
        assert code == EXIT_FAILED
        out = capsys.readouterr().out
        assert "OK: a.js" in out
        assert "threshold exceeded" in out

    def test_no_files_is_vacuous_pass(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_PASSED
        assert "All syntax validation tests passed!" in capsys.readouterr().out

    def test_pyflakes_analyzer(
        self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"a.py": "import os\n", "b.py": VALID_PY})
        assert main(["a.py", "b.py", "--analyzer", "pyflakes", "-v"]) == EXIT_FAILED
        out = capsys.readouterr().out
        assert "Warnings: 1 (threshold 0) - threshold exceeded" in out
        assert "a.py:1:1: warning: 'os' imported but unused" in out

    def test_root_option(self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]) -> None:
        write_tree({"checkout/run.js": VALID_JS})
        assert main(["run.js", "--root", "checkout"]) == EXIT_PASSED

    def test_sql_dialect_from_config(self, write_tree: WriteTree) -> None:
        write_tree(
            {
                "gate.yaml": "files: [q.sql]\nsqlDialect: postgres\n",
                "q.sql": "SELECT FROM WHERE",
            }
        )
        assert main([]) == EXIT_FAILED


class TestUsageErrors:
    def test_invalid_config(
        self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"gate.yaml": "files: [a.py]\nmaxWarnings: 3\n"})
        assert main([]) == EXIT_USAGE
        assert "gate.yaml:2:1: UNKNOWN_CONFIG_KEY" in capsys.readouterr().err

    def test_unknown_sql_dialect(
        self, write_tree: WriteTree, capsys: pytest.CaptureFixture[str]
    ) -> None:
        write_tree({"gate.yaml": "files: [q.sql]\nsqlDialect: nosuch\n", "q.sql": "SELECT 1"})
        assert main([]) == EXIT_USAGE
        captured = capsys.readouterr()
        assert "gate.yaml:2:1: INVALID_CONFIG_VALUE" in captured.err
        assert "FAILED: q.sql" not in captured.out

    def test_explicit_missing_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--config", "ci/gate.yaml"]) == EXIT_USAGE
        assert "CONFIG_NOT_FOUND" in capsys.readouterr().err

    def test_env_config_path(self, write_tree: WriteTree, monkeypatch: pytest.MonkeyPatch) -> None:
        write_tree({"ci/gate.yaml": "files: [missing.py]\n"})
        monkeypatch.setenv("GATE_CONFIG", "ci/gate.yaml")
        assert main([]) == EXIT_FAILED

    def test_unknown_analyzer_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("ANALYZER", "jshint")
        assert main([]) == EXIT_USAGE
        assert "Unknown analyzer 'jshint'" in capsys.readouterr().err

    def test_eslint_analyzer_without_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--analyzer", "eslint-report"]) == EXIT_USAGE
        assert "needs a report file" in capsys.readouterr().err

    def test_negative_max_warnings(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--max-warnings", "-1"])
        assert excinfo.value.code == EXIT_USAGE

    def test_invalid_env_threshold(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("WARNING_THRESHOLD", "lots")
        assert main([]) == EXIT_USAGE
        assert "invalid environment settings" in capsys.readouterr().err
