"""Tests for the feeddate command line."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from conftest import CHRISTMAS_NOON, DAY, HOUR
from feeddate.cli import main


def _run(*args: str):
    return CliRunner().invoke(main, list(args))


class TestParseCommand:
    def test_prints_milliseconds(self, now_ms: int) -> None:
        result = _run("parse", "Fri, 25 Dec 2020 12:00:00 GMT", "--now", str(now_ms))
        assert result.exit_code == 0
        assert str(CHRISTMAS_NOON * 1000) in result.output

    def test_fallback(self, now_ms: int) -> None:
        result = _run("parse", "", "--fallback", "2020-12-25T12:00:00Z", "--now", str(now_ms))
        assert result.exit_code == 0
        assert str(CHRISTMAS_NOON * 1000) in result.output

    def test_unusable_exits_1(self, now_ms: int) -> None:
        result = _run("parse", "not a date", "--now", str(now_ms))
        assert result.exit_code == 1

    def test_stale_date_exits_1(self, now_ms: int) -> None:
        result = _run("parse", "2019-01-01", "--now", str(now_ms))
        assert result.exit_code == 1

    def test_no_validate_skips_freshness(self, now_ms: int) -> None:
        result = _run("parse", "2019-01-01", "--no-validate", "--now", str(now_ms))
        assert result.exit_code == 0
        assert result.output.strip() == "1546300800000"

    def test_no_validate_uses_fallback(self) -> None:
        result = _run("parse", "", "--fallback", "2019-01-01", "--no-validate")
        assert result.exit_code == 0
        assert "1546300800000" in result.output

    def test_no_validate_still_rejects_garbage(self) -> None:
        result = _run("parse", "not a date", "--no-validate")
        assert result.exit_code == 1


class TestFormatCommand:
    def test_relative(self, now_ms: int) -> None:
        result = _run("format", str(now_ms - 7200 * 1000), "--now", str(now_ms))
        assert result.exit_code == 0
        assert result.output.strip() == "2 hours ago"

    def test_absolute_utc(self, now_ms: int) -> None:
        result = _run("format", str(now_ms - 10 * DAY * 1000), "--now", str(now_ms), "--utc")
        assert result.output.strip() == "12/15/2020"

    @pytest.mark.parametrize("instant", ["nan", "inf", "-inf", "-1e30"])
    def test_unusable_instant_is_usage_error(self, now_ms: int, instant: str) -> None:
        result = _run("format", "--now", str(now_ms), "--", instant)
        assert result.exit_code == 2
        assert "INSTANT" in result.output
        assert "Traceback" not in result.output


class TestFilterCommand:
    def test_indices(self, now_ms: int) -> None:
        stamps = [str(now_ms), str(now_ms - 2 * HOUR * 1000), "bad", str(now_ms - 50 * HOUR * 1000)]
        result = _run("filter", "--hours", "24", "--now", str(now_ms), *stamps)
        assert result.exit_code == 0
        assert "[0, 1]" in result.output

    def test_hours_required(self) -> None:
        result = _run("filter", "123")
        assert result.exit_code != 0

    @pytest.mark.parametrize("hours", ["nan", "inf"])
    def test_non_finite_hours_is_usage_error(self, now_ms: int, hours: str) -> None:
        result = _run("filter", "--hours", hours, "--now", str(now_ms), str(now_ms))
        assert result.exit_code == 2
        assert "--hours" in result.output


class TestScanCommand:
    def test_json_output(self, dates_file, now_ms: int) -> None:
        path = dates_file([
            "Fri, 25 Dec 2020 12:00:00 GMT",
            "",
            "garbage",
            "2019-01-01",
        ])
        result = _run("scan", str(path), "--output", "json", "--now", str(now_ms))
        assert result.exit_code == 0
        rows = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        assert len(rows) == 3
        assert rows[0]["format"] == "rfc2822"
        assert rows[0]["fresh"] is True
        assert rows[0]["relative"] == "3 hours ago"
        assert rows[1]["instant_ms"] is None
        assert rows[1]["line"] == 3
        assert rows[2]["fresh"] is False

    def test_table_output(self, dates_file, now_ms: int) -> None:
        path = dates_file(["2020-12-25T12:00:00"])
        result = _run("scan", str(path), "--now", str(now_ms))
        assert result.exit_code == 0

    def test_missing_file(self) -> None:
        result = _run("scan", "/nonexistent/dates.txt")
        assert result.exit_code != 0


class TestBenchCommand:
    def test_runs(self) -> None:
        result = _run("bench", "--iterations", "4")
        assert result.exit_code == 0


def test_version() -> None:
    result = _run("--version")
    assert "1.0.0" in result.output


class TestLogLevel:
    @pytest.mark.parametrize("level", ["DEBUG", "warning"])
    def test_accepted(self, now_ms: int, level: str) -> None:
        result = _run("--log-level", level, "parse", "2020-12-25T12:00:00", "--now", str(now_ms))
        assert result.exit_code == 0
        assert str(CHRISTMAS_NOON * 1000) in result.output

    def test_unknown_level_rejected(self) -> None:
        result = _run("--log-level", "LOUD", "parse", "2020-12-25")
        assert result.exit_code == 2
        assert "--log-level" in result.output
