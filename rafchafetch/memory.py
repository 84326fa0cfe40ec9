"""Memory and swap usage."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

import psutil

_IS_WINDOWS = os.name == "nt"
_SWAP_COMMAND = "free -b | grep Swap"

_GREEN = "\x1b[32m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class MemoryStats:
    """A usage percentage, shown coloured by how high it is."""

    percent: float

    def __str__(self) -> str:
        if self.percent <= 50.0:
            color = _GREEN
        elif self.percent <= 75.0:
            color = _YELLOW
        else:
            color = _RED
        return f"{color}{self.percent:.1f}%{_RESET}"


def usage_percent(used: float, total: float) -> float:
    """Return ``used`` as a percentage of ``total``; 0.0 when total is zero."""
    if total > 0:
        return used / total * 100.0
    return 0.0


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_free_swap(output: str) -> MemoryStats | None:
    """Parse the ``Swap:`` line of ``free -b`` output."""
    parts = output.split()
    if len(parts) < 4:
        return None
    total = _parse_int(parts[1])
    used = _parse_int(parts[2])
    return MemoryStats(usage_percent(used, total))


def get_memory_info() -> MemoryStats | None:
    """Return physical memory usage, or None if it cannot be read."""
    try:
        mem = psutil.virtual_memory()
    except (OSError, RuntimeError):
        return None
    free = mem.free if _IS_WINDOWS else mem.available
    return MemoryStats(usage_percent(mem.total - free, mem.total))


def get_swap_info() -> MemoryStats | None:
    """Return swap usage, or None if it cannot be read."""
    if _IS_WINDOWS:
        try:
            swap = psutil.swap_memory()
        except (OSError, RuntimeError):
            return None
        # Reported as a fraction rather than a percentage on this platform.
        return MemoryStats(usage_percent(swap.used, swap.total) / 100.0)
    try:
        result = subprocess.run(
            ["sh", "-c", _SWAP_COMMAND], capture_output=True, check=False
        )
    except OSError:
        return None
    return parse_free_swap(result.stdout.decode("utf-8", errors="replace"))