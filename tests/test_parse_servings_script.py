"""Tests for the parse_servings command-line script."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "parse_servings.py"


@pytest.fixture(scope="module")
def script():
    """Load the script as a module."""
    spec = importlib.util.spec_from_file_location("parse_servings", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestParseLine:
    """Tests for single-line parsing."""

    def test_success(self, script):
        """Test the JSON shape of a parsed line."""
        assert script.parse_line("1 cup (240 ml)") == {
            "input": "1 cup (240 ml)",
            "quantities": [
                {"kind": "volume", "magnitude": 1.0, "unit": "cup"},
                {"kind": "volume", "magnitude": 240.0, "unit": "milliliter"},
            ],
        }

    def test_failure(self, script):
        """Test the JSON shape of a failed line."""
        result = script.parse_line("1 cup of rice")
        assert result["error"]["kind"] == "trailing_content"
        assert result["error"]["position"] == 6


class TestMain:
    """Tests for the script entry point."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        import logging

        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_arguments(self, script, monkeypatch, capsys):
        """Test parsing strings given as arguments."""
        monkeypatch.setattr(sys, "argv", ["parse_servings.py", "2 tbsp", "1 package"])
        with pytest.raises(SystemExit) as exc_info:
            script.main()

        assert exc_info.value.code == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["input"] for line in lines] == ["2 tbsp", "1 package"]

    def test_stdin_with_failure(self, script, monkeypatch, capsys):
        """Test reading stdin and exiting non-zero when a line fails."""
        monkeypatch.setattr(sys, "argv", ["parse_servings.py"])
        monkeypatch.setattr(sys, "stdin", ["3 oz\n", "\n", "garbage\n"])
        with pytest.raises(SystemExit) as exc_info:
            script.main()

        assert exc_info.value.code == 1
        results = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert results[0]["quantities"] == [{"kind": "mass", "magnitude": 3.0, "unit": "ounce"}]
        assert "error" in results[1]
