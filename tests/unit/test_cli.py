"""Tests for the pinframe CLI."""

import json

import pytest
from typer.testing import CliRunner

from pinframe import cli
from pinframe.cli import app


runner = CliRunner()


class TestCalc:
    def test_plain_output(self):
        result = runner.invoke(app, ["calc", "-t", "16", "-f", "5", "-o", "6", "-l", "8"])
        assert result.exit_code == 0
        assert result.output.strip() == "pad=3 shift=5"

    def test_json_output(self):
        result = runner.invoke(
            app, ["calc", "--term-height", "16", "--frame-height", "5", "--offset", "11", "--lines", "8", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"pad": 4, "shift": 0}

    def test_detected_height_used_by_default(self, monkeypatch):
        monkeypatch.setattr(cli, "_detected_height", lambda: 16)
        result = runner.invoke(app, ["calc", "-f", "5", "-o", "4", "-l", "8"])
        assert result.exit_code == 0
        assert result.output.strip() == "pad=1 shift=7"

    def test_negative_option_rejected(self):
        result = runner.invoke(app, ["calc", "-t", "16", "-f", "5", "-o", "-1", "-l", "8"])
        assert result.exit_code == 2


class TestSweep:
    def test_table_rows(self):
        result = runner.invoke(app, ["sweep", "-t", "16", "-f", "5", "-l", "8", "--max-offset", "7"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].split() == ["offset", "pad", "shift"]
        assert len(lines) == 9
        assert lines[5].split() == ["4", "1", "7"]
        assert lines[8].split() == ["7", "4", "4"]

    def test_default_max_offset_is_terminal_height(self):
        result = runner.invoke(app, ["sweep", "-t", "16", "-f", "5", "-l", "8"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[-1].split() == ["16", "4", "0"]


class TestMeasure:
    def test_stdin(self):
        result = runner.invoke(app, ["measure", "-c", "10"], input="short\n" + "y" * 15 + "\n")
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_stdin_invalid_utf8_replaced(self):
        result = runner.invoke(app, ["measure", "-c", "10"], input=b"ok\xff\xfe\n")
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_file(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("a\nb\nc\n", encoding="utf-8")
        result = runner.invoke(app, ["measure", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["measure", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
