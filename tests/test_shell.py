import subprocess

import pytest

from rafchafetch import shell
from rafchafetch.shell import get_shell


@pytest.fixture
def unix(monkeypatch):
    monkeypatch.setattr(shell, "_IS_WINDOWS", False)


@pytest.fixture
def windows(monkeypatch):
    monkeypatch.setattr(shell, "_IS_WINDOWS", True)


def test_shell_from_path(unix):
    assert get_shell({"SHELL": "/usr/bin/zsh"}) == "zsh"


def test_shell_without_slash(unix):
    assert get_shell({"SHELL": "fish"}) == "fish"


def test_shell_fallback_runs_sh(unix, monkeypatch):
    def fake_run(args, **kwargs):
        assert args == ["sh", "-c", "echo $0"]
        return subprocess.CompletedProcess(args, 0, stdout=b"sh\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_shell({}) == "sh"


def test_shell_fallback_failure(unix, monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 2, stdout=b""),
    )
    assert get_shell({}) == "unknown"


def test_windows_powershell(windows):
    assert get_shell({"PSModulePath": "C:\\Modules"}) == "PowerShell"


def test_windows_comspec(windows):
    env = {"PSModulePath": "", "ComSpec": "C:\\Windows\\system32\\cmd.exe"}
    assert get_shell(env) == "cmd.exe"


def test_windows_unknown(windows):
    assert get_shell({}) == "unknown"