# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for the `procdoc` command.

Tests cover:
- JSON Lines output to stdout and to a file
- Block selection with `-f`/`-g`, last one wins
- Default filetype with `-t`
- Missing inputs, quiet mode and the version flag
"""

from __future__ import annotations

import json

from pathlib import Path

import pytest

from procdoc import __version__
from procdoc.cli.__main__ import keep_last_selector


pytestmark = [pytest.mark.unit]


def _records(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines()]


class TestOutput:
    """Where records go."""

    def test_stdout(self, run_cli, shell_sample: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli([str(shell_sample)]) == 0

        records = _records(capsys.readouterr().out)
        assert [r["id"] for r in records] == [0, 1, 2]
        assert [r["type"] for r in records] == ["generic", "function", "generic"]

    def test_output_file(
        self, run_cli, shell_sample: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = tmp_path / "out.jsonl"

        assert run_cli(["-o", str(target), str(shell_sample)]) == 0

        assert capsys.readouterr().out == ""
        assert len(_records(target.read_text(encoding="utf-8"))) == 3

    def test_dash_is_stdout(
        self, run_cli, c_sample: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_cli(["--output=-", str(c_sample)]) == 0

        assert len(_records(capsys.readouterr().out)) == 2

    def test_multiple_files_share_ids(
        self, run_cli, shell_sample: Path, c_sample: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_cli([str(c_sample), str(shell_sample)]) == 0

        records = _records(capsys.readouterr().out)
        assert [r["id"] for r in records] == [0, 1, 2, 3, 4]
        assert records[0]["file"] == str(c_sample)


class TestSelection:
    """`-f` and `-g`."""

    @pytest.mark.parametrize(
        ("flags", "ids"),
        [
            (["-f"], [1]),
            (["--generics"], [0, 2]),
            (["-f", "-g"], [0, 2]),
            (["-g", "-f"], [1]),
            (["-g", "-g", "--functions"], [1]),
        ],
    )
    def test_selection(
        self,
        run_cli,
        shell_sample: Path,
        capsys: pytest.CaptureFixture[str],
        flags: list[str],
        ids: list[int],
    ) -> None:
        assert run_cli([*flags, str(shell_sample)]) == 0

        assert [r["id"] for r in _records(capsys.readouterr().out)] == ids

    def test_environment_selection(
        self,
        run_cli,
        shell_sample: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("PROCDOC_BLOCKS", "generic")

        assert run_cli([str(shell_sample)]) == 0

        assert [r["id"] for r in _records(capsys.readouterr().out)] == [0, 2]

    @pytest.mark.parametrize(
        ("tokens", "expected"),
        [
            (["-f", "-g", "a"], ["-g", "a"]),
            (["-g", "a", "-f"], ["a", "-f"]),
            (["-f", "--", "-g"], ["-f", "--", "-g"]),
            (["a", "b"], ["a", "b"]),
        ],
    )
    def test_keep_last_selector(self, tokens: list[str], expected: list[str]) -> None:
        assert keep_last_selector(tokens) == expected


class TestFiletype:
    """`-t` default filetype."""

    def test_default_filetype(
        self, run_cli, write_source, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_source("tool", ["##", "# tool - Does things.", "tool()"])

        assert run_cli(["-t", "sh", str(path)]) == 0

        (record,) = _records(capsys.readouterr().out)
        assert record["type"] == "function"
        assert record["content"]["name"] == "tool"

    def test_without_default_filetype(
        self, run_cli, write_source, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_source("tool", ["##", "# tool - Does things.", "tool()"])

        assert run_cli([str(path)]) == 0

        (record,) = _records(capsys.readouterr().out)
        assert record["type"] == "generic"


class TestFailures:
    """Fatal errors and diagnostics."""

    def test_missing_file(
        self, run_cli, shell_sample: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "missing.sh"

        assert run_cli([str(shell_sample), str(missing)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"file does not exist: {missing}" in captured.err

    def test_directory_is_not_a_file(
        self, run_cli, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_cli([str(tmp_path)]) == 1

        assert "file does not exist" in capsys.readouterr().err

    def test_no_input_files(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli([]) == 1

        assert "no input files" in capsys.readouterr().err

    def test_warnings_go_to_stderr(
        self, run_cli, write_source, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_source("broken.sh", ["##", "# text", "echo hi"])

        assert run_cli([str(path)]) == 0

        captured = capsys.readouterr()
        assert len(_records(captured.out)) == 1
        assert f"{path}:3: unclosed block" in captured.err

    def test_quiet_hides_warnings(
        self, run_cli, write_source, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_source("broken.sh", ["##", "# text", "echo hi"])

        assert run_cli(["-q", str(path)]) == 0

        assert "unclosed block" not in capsys.readouterr().err

    def test_errors_do_not_change_exit_status(
        self, run_cli, write_source, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_source("bad.sh", ["##", "# (anonymous)", "x()", "##", "# ok", "##"])

        assert run_cli(["-q", str(path)]) == 0

        captured = capsys.readouterr()
        assert [r["id"] for r in _records(captured.out)] == [1]
        assert "missing title in function block" in captured.err


class TestVersion:
    """`--version`."""

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, run_cli, flag: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli([flag]) == 0

        assert f"procdoc version {__version__}" in capsys.readouterr().out
