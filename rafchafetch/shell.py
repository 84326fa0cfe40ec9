"""Detection of the user's shell."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping

_IS_WINDOWS = os.name == "nt"


def _unix_shell(environ: Mapping[str, str]) -> str:
    shell_path = environ.get("SHELL")
    if shell_path is not None:
        return shell_path.split("/")[-1]
    result = subprocess.run(["sh", "-c", "echo $0"], capture_output=True, check=False)
    if result.returncode == 0:
        return result.stdout.decode("utf-8", errors="replace").strip()
    return "unknown"


def _windows_shell(environ: Mapping[str, str]) -> str:
    if environ.get("PSModulePath"):
        return "PowerShell"
    comspec = environ.get("ComSpec")
    if comspec is None:
        return "unknown"
    return comspec.split("\\")[-1]


def get_shell(environ: Mapping[str, str] | None = None) -> str:
    """Return the name of the user's shell, read from ``environ`` (default: os.environ)."""
    if environ is None:
        environ = os.environ
    if _IS_WINDOWS:
        return _windows_shell(environ)
    return _unix_shell(environ)