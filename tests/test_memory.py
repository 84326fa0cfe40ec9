import subprocess
from collections import namedtuple

import psutil
import pytest

from rafchafetch import memory
from rafchafetch.memory import (
    MemoryStats,
    get_memory_info,
    get_swap_info,
    parse_free_swap,
    usage_percent,
)

VirtualMemory = namedtuple("VirtualMemory", "total available free")


def test_low_usage_is_green():
    assert str(MemoryStats(50.0)) == "\x1b[32m50.0%\x1b[0m"


def test_medium_usage_is_yellow():
    assert str(MemoryStats(75.0)).startswith("\x1b[33m")


def test_high_usage_is_red():
    text = str(MemoryStats(75.04))
    assert text.startswith("\x1b[31m")
    assert text.endswith("\x1b[0m")


def test_usage_percent_zero_total():
    assert usage_percent(10, 0) == 0.0


def test_usage_percent_full():
    assert usage_percent(8, 8) == 100.0


@pytest.mark.parametrize("used,total", [(0, 5), (1, 3), (7, 9)])
def test_usage_percent_in_range(used, total):
    assert 0.0 <= usage_percent(used, total) <= 100.0


def test_parse_free_swap_line():
    stats = parse_free_swap("Swap:   2048   1024   1024\n")
    assert stats == MemoryStats(50.0)


def test_parse_free_swap_too_short():
    assert parse_free_swap("Swap: 0 0") is None


def test_parse_free_swap_empty():
    assert parse_free_swap("") is None


def test_parse_free_swap_garbage_numbers():
    assert parse_free_swap("Swap: x y z") == MemoryStats(0.0)


def test_get_memory_info_unix(monkeypatch):
    monkeypatch.setattr(memory, "_IS_WINDOWS", False)
    monkeypatch.setattr(
        psutil, "virtual_memory", lambda: VirtualMemory(total=400, available=100, free=50)
    )
    assert get_memory_info() == MemoryStats(usage_percent(300, 400))


def test_get_memory_info_error(monkeypatch):
    def broken():
        raise OSError("unreadable")

    monkeypatch.setattr(psutil, "virtual_memory", broken)
    assert get_memory_info() is None


def test_get_swap_info_unix(monkeypatch):
    monkeypatch.setattr(memory, "_IS_WINDOWS", False)

    def fake_run(args, **kwargs):
        assert args[-1] == "free -b | grep Swap"
        return subprocess.CompletedProcess(args, 0, stdout=b"Swap: 100 25 75\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_swap_info() == MemoryStats(usage_percent(25, 100))


def test_get_swap_info_no_swap_line(monkeypatch):
    monkeypatch.setattr(memory, "_IS_WINDOWS", False)
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 1, stdout=b""),
    )
    assert get_swap_info() is None


def test_get_swap_info_command_missing(monkeypatch):
    monkeypatch.setattr(memory, "_IS_WINDOWS", False)

    def broken(args, **kwargs):
        raise FileNotFoundError("sh")

    monkeypatch.setattr(subprocess, "run", broken)
    assert get_swap_info() is None