"""Tests for the command-line entry point (andy.cli).

The prompts are skipped with ``--answers`` or replaced by patching
``RichInputProvider.ask``; every run writes into ``tmp_path``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from andy import __version__
from andy.cli import main

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def answers_file(tmp_path: Path, default_answers) -> Path:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(default_answers), encoding="utf-8")
    return path


def _exit_code(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestMain:
    def test_answers_file_run(self, tmp_path, answers_file):
        out = tmp_path / "project"
        assert _exit_code(["--output", str(out), "--answers", str(answers_file)]) == 0
        assert (out / "mobile" / "src" / "main" / "AndroidManifest.xml").is_file()

    def test_partial_answers_use_defaults(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"packageName": "org.example.demo"}), encoding="utf-8")
        out = tmp_path / "project"
        assert _exit_code(["-o", str(out), "--answers", str(path)]) == 0
        assert (out / "mobile/src/main/java/org/example/demo/MainActivity.java").is_file()

    def test_output_from_environment(self, tmp_path, answers_file):
        out = tmp_path / "from-env"
        with patch.dict(os.environ, {"ANDY_OUTPUT_DIR": str(out)}):
            assert _exit_code(["--answers", str(answers_file)]) == 0
        assert (out / "build.gradle").is_file()

    def test_missing_answers_file(self, tmp_path):
        assert _exit_code(["--answers", str(tmp_path / "nope.json")]) == 1

    def test_answers_file_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"packageName": "org.example"}]), encoding="utf-8")
        out = tmp_path / "project"
        assert _exit_code(["-o", str(out), "--answers", str(path)]) == 1
        assert not out.exists()

    def test_answers_file_unknown_key(self, tmp_path):
        path = tmp_path / "typo.json"
        path.write_text(json.dumps({"packagename": "org.example"}), encoding="utf-8")
        out = tmp_path / "project"
        assert _exit_code(["-o", str(out), "--answers", str(path)]) == 1
        assert not out.exists()

    def test_answers_file_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe{}")
        out = tmp_path / "project"
        assert _exit_code(["-o", str(out), "--answers", str(path)]) == 1
        assert not out.exists()

    def test_invalid_answer_values(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        out = tmp_path / "project"
        assert _exit_code(["-o", str(out), "--answers", str(path)]) == 1
        assert not out.exists()

    def test_aborted_prompts_exit_nonzero(self, tmp_path):
        out = tmp_path / "project"
        with patch(
            "andy.scaffolder.collector.RichInputProvider.ask", side_effect=EOFError
        ):
            assert _exit_code(["-o", str(out), "--no-greeting"]) == 1
        assert not out.exists()

    def test_write_failure_exit_nonzero(self, tmp_path, answers_file):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        assert _exit_code(["-o", str(blocker), "--answers", str(answers_file)]) == 1

    def test_version(self, capsys):
        assert _exit_code(["--version"]) == 0
        assert __version__ in capsys.readouterr().out
