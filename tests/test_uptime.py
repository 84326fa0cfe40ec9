import re

import pytest

from rafchafetch import uptime
from rafchafetch.uptime import UptimeError, format_uptime, get_uptime, parse_uptime


def test_parse_truncates_seconds():
    assert parse_uptime("12345.67 54321.00\n") == 12345


def test_parse_empty_raises():
    with pytest.raises(UptimeError):
        parse_uptime("")


def test_parse_garbage_raises():
    with pytest.raises(UptimeError):
        parse_uptime("abc 1.0")


def test_parse_negative_clamps_to_zero():
    assert parse_uptime("-5.0") == 0


def test_get_uptime_reads_file(tmp_path, monkeypatch):
    monkeypatch.setattr(uptime, "_IS_WINDOWS", False)
    source = tmp_path / "uptime"
    source.write_text("3600.99 100.00\n")
    assert get_uptime(source) == 3600


def test_get_uptime_missing_file(tmp_path):
    with pytest.raises(UptimeError):
        get_uptime(tmp_path / "missing")


def test_format_zero():
    assert format_uptime(0) == "0d 0h 0m"


def test_format_mixed():
    assert format_uptime(86400 + 3600 + 60 + 59) == "1d 1h 1m"


@pytest.mark.parametrize("seconds", [0, 59, 3599, 86399, 86400 * 400 + 12345])
def test_format_fields_in_range(seconds):
    match = re.fullmatch(r"(\d+)d (\d+)h (\d+)m", format_uptime(seconds))
    assert match is not None
    days, hours, minutes = (int(g) for g in match.groups())
    assert hours < 24 and minutes < 60
    assert days * 86400 + hours * 3600 + minutes * 60 <= seconds < (
        days * 86400 + hours * 3600 + (minutes + 1) * 60
    )