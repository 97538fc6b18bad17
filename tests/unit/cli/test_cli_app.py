# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for the rlocate command-line interface."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from rlocate import __version__
from rlocate.cli import main
from tests.fixtures.stubs import write_manifest

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


@pytest.fixture(autouse=True)
def clear_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RUNFILES_MANIFEST_FILE", raising=False)
    monkeypatch.delenv("RUNFILES_DIR", raising=False)
    monkeypatch.delenv("RLOCATE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("RLOCATE_LOG_LEVEL", raising=False)


@pytest.fixture
def tool(tmp_path: Path) -> Path:
    """A launch path with an in-tree manifest mapping ``ws/data.txt``."""
    binary = tmp_path / "bin" / "tool"
    tree = tmp_path / "bin" / "tool.runfiles"
    tree.mkdir(parents=True)
    _ = write_manifest(tree / "MANIFEST", [f"ws/data.txt {tmp_path}/real/data.txt"])
    return binary


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"rlocate {__version__}"


def test_discover_text(tool: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["discover", "--argv0", str(tool)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"manifest: {tool}.runfiles/MANIFEST",
        f"directory: {tool}.runfiles",
    ]


def test_discover_json_with_directory_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = tmp_path / "other.runfiles"
    tree.mkdir()

    code = main(["discover", "--argv0", str(tmp_path / "nothing"), "--directory", str(tree), "--format", "json"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"manifest": None, "directory": str(tree)}


def test_discover_reads_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    tree = tmp_path / "env.runfiles"
    tree.mkdir()
    monkeypatch.setenv("RUNFILES_DIR", str(tree))

    assert main(["discover", "--argv0", str(tmp_path / "nothing")]) == 0
    assert f"directory: {tree}" in capsys.readouterr().out


def test_resolve_prints_paths(tool: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["resolve", "--argv0", str(tool), "ws/data.txt", "ws/other.txt"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        f"{tmp_path}/real/data.txt",
        f"{tool}.runfiles/ws/other.txt",
    ]


def test_resolve_reports_unresolved_paths(tool: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["resolve", "--argv0", str(tool), "--format", "json", "ws/../escape"])

    assert code == 1
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["results"] == [{"path": "ws/../escape", "resolved": None}]
    assert payload["runfiles"]["directory"] == f"{tool}.runfiles"
    assert "Unresolved runfiles path: ws/../escape" in captured.err


def test_env_shell_output(tool: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["env", "--argv0", str(tool), "--shell"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"export RUNFILES_MANIFEST_FILE={tool}.runfiles/MANIFEST"
    assert lines[1] == f"export RUNFILES_DIR={tool}.runfiles"
    assert lines[2] == f"export JAVA_RUNFILES={tool}.runfiles"


def test_env_json_output(tool: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["env", "--argv0", str(tool), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["RUNFILES_MANIFEST_FILE", "RUNFILES_DIR", "JAVA_RUNFILES"]


def test_missing_runfiles_exit_with_error_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    argv0 = str(tmp_path / "nothing")

    assert main(["resolve", "--argv0", argv0, "ws/data.txt"]) == 2

    err = capsys.readouterr().err
    assert "[rlocate] RF101: cannot find runfiles" in err
    assert argv0 in err


def test_bad_manifest_exit_with_error_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    manifest = write_manifest(tmp_path / "tool.runfiles_manifest", ["ok /x", "broken"])

    assert main(["env", "--argv0", str(tmp_path / "tool"), "--manifest", str(manifest)]) == 2
    assert "RF202" in capsys.readouterr().err


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main([])
    assert excinfo.value.code == 2


def test_options_before_command_are_kept(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = tmp_path / "other.runfiles"
    tree.mkdir()

    code = main(["--argv0", str(tmp_path / "nothing"), "--directory", str(tree), "--format", "json", "discover"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"manifest": None, "directory": str(tree)}


def test_options_after_command_override_earlier_ones(
    tool: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = main(["--format", "json", "--argv0", str(tmp_path / "nothing"), "discover", "--argv0", str(tool)])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["directory"] == f"{tool}.runfiles"


def test_log_level_before_command_is_applied(tool: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "debug", "discover", "--argv0", str(tool)]) == 0

    assert "[DEBUG] Runfiles manifest candidate" in capsys.readouterr().err


def test_log_level_falls_back_to_environment(
    tool: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("RLOCATE_LOG_LEVEL", "debug")

    assert main(["discover", "--argv0", str(tool)]) == 0

    assert "[DEBUG] Runfiles manifest candidate" in capsys.readouterr().err


def test_log_format_falls_back_to_environment(
    tool: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("RLOCATE_LOG_FORMAT", "json")

    assert main(["resolve", "--argv0", str(tool), "ws/../escape"]) == 1

    records = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line]
    assert any(record["message"] == "Unresolved runfiles path: ws/../escape" for record in records)


def test_log_level_flag_beats_environment(
    tool: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("RLOCATE_LOG_LEVEL", "debug")

    assert main(["discover", "--argv0", str(tool), "--log-level", "error"]) == 0

    assert capsys.readouterr().err == ""
