"""Unit tests for utility functions (andy.utils).

Tests cover:
- load_json (use tmp_path)
- Rich output helpers (print_action, print_greeting, print_summary_table, etc.)
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from andy.utils import (
    ACTION_COLORS,
    console,
    load_json,
    print_action,
    print_error,
    print_greeting,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# load_json
# ---------------------------------------------------------------------------


class TestLoadJson:
    @pytest.mark.unit
    def test_loads_object(self, tmp_path: Path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"moduleName": "app"}), encoding="utf-8")
        assert load_json(path) == {"moduleName": "app"}

    @pytest.mark.unit
    def test_rejects_non_object(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_json(path)

    @pytest.mark.unit
    def test_rejects_non_utf8(self, tmp_path: Path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(UnicodeDecodeError):
            load_json(path)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_action(self):
        with console.capture() as capture:
            print_action("create", "mobile/build.gradle")
        assert capture.get().rstrip("\n") == "  create mobile/build.gradle"

    @pytest.mark.unit
    def test_action_colors(self):
        assert set(ACTION_COLORS) == {"create", "force", "exists"}

    @pytest.mark.unit
    def test_print_greeting(self):
        with console.capture() as capture:
            print_greeting("OK Andy!")
        assert "OK Andy!" in capture.get()

    @pytest.mark.unit
    def test_print_summary_table(self):
        # Should not raise
        print_summary_table(
            {"Key1": "Value1", "Key2": "Value2"},
            title="Test Summary",
        )

    @pytest.mark.unit
    def test_print_success(self):
        print_success("Generated")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Something failed")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("Check your answers")
