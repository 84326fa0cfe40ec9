"""System uptime."""

from __future__ import annotations

import math
import os
import time
from pathlib import Path

import psutil

_IS_WINDOWS = os.name == "nt"
_PROC_UPTIME = "/proc/uptime"
_MAX_SECONDS = 2**64 - 1


class UptimeError(Exception):
    """Raised when the uptime cannot be determined."""


def parse_uptime(content: str) -> int:
    """Return whole seconds from the contents of /proc/uptime."""
    tokens = content.split()
    if not tokens:
        raise UptimeError("Invalid /proc/uptime format")
    try:
        value = float(tokens[0])
    except ValueError:
        raise UptimeError("Invalid /proc/uptime format") from None
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _MAX_SECONDS if value > 0 else 0
    return min(max(int(value), 0), _MAX_SECONDS)


def get_uptime(path: str | os.PathLike[str] | None = None) -> int:
    """Return the system uptime in whole seconds."""
    if path is None and _IS_WINDOWS:
        return max(int(time.time() - psutil.boot_time()), 0)
    source = Path(path) if path is not None else Path(_PROC_UPTIME)
    try:
        content = source.read_text()
    except OSError as exc:
        raise UptimeError(f"Error reading {source}: {exc}") from exc
    return parse_uptime(content)


def format_uptime(seconds: int) -> str:
    """Format seconds as days, hours and minutes."""
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    return f"{days}d {hours}h {minutes}m"