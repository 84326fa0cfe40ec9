"""Command-line entry point: prints system information next to a picture."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

from .hostname import get_hostname
from .memory import MemoryStats, get_memory_info, get_swap_info
from .network import get_ip_address
from .shell import get_shell
from .uptime import UptimeError, format_uptime, get_uptime

_RESET = "\x1b[0m"
_CYAN = "\x1b[36m"
_MAGENTA = "\x1b[35m"
_BLUE = "\x1b[34m"
_GREEN = "\x1b[32m"
_YELLOW = "\x1b[33m"
_WHITE = "\x1b[37m"
_RED = "\x1b[31m"

_TITLE = "rafchafetch"
_TITLE_COLORS = (
    _MAGENTA, _BLUE, _GREEN, _MAGENTA, _BLUE, _YELLOW,
    _WHITE, _CYAN, _YELLOW, _CYAN, _RED,
)
_ART_COLORS = (_CYAN,) * 3 + (_MAGENTA,) * 3 + (_BLUE,) * 3 + (_GREEN,) * 2


@dataclass(frozen=True)
class _Layout:
    art: tuple[str, ...]
    shell_label: str = "Shell:"


_LAYOUTS = {
    "-a": _Layout(
        (
            "⡏⣭⠭⣭⣛⡛⠿⣿⣿⣿⡿⠿⠿⠋⠭⠭⢈⣩⣴⠾⣿⡌⣷⡌⢿⣿⣿         ",
            " ⣿⣷⣦⢉⡛⢿⡖⢨⣴⡒⢿⣿⣿⣷⣚⡿⢛⣃⣾⣶⣥⡘⣿⡄⢻⣿         ",
            "⡆⣯⠰⣶⣾⠟⣣⡴⢦⡍⡻⢷⣮⣍⣛⠟⣛⠲⢬⣙⠻⠿⠇⢹⣿⠈⣿         ",
            "⠷⠈⣌⢋⣴⣿⡿⣰⣿⡇⢿⡇⢪⣍⣋⠐⢋ ⣳⠁⣤⣄⡛⢘⡁⢶⡎         ",
            "⠖⡶⢠⣿⣿⡟⣀⢻⣿⣿⣌⢿⠘⣿⣿⣷⡔⢶⡄⣀⡙⣿⠖⡈⠁⠍⣓         ",
            "⠸⠃⡱⣿⣿⢲⡯⢈⠻⣿⣿⣷⣥⡙⠳⣬⣿⡌⣅⠊⢁⡄⠸⣿⠠⣆         ",
            "⣶⣿⢡⣿⣿⡘⡡⠛⠓⢮⣙⣈⣙⣓⡸⠒⠨⠅⣹⣿⣮⡻⢠⡶⠘⢿⣷         ",
            "⣲⣿⢸⣿⣝⠳⠄⠣⡰⢆⣿⣿⣿⣿⣧⣓⣘⠃⣛⣽⣿⢇⣼⡟⠳⠢⣤         ",
            "⢉⣭⠢⠉⠙⠛⣡⣬⡙⢛⡻⠦⠾⠟⢛⣋⡉⠔⣛⠉⠄⣯⡻⢧⡰⣿⢨         ",
            "⣿⣿⡄ ⠾⢡⣛⣏⡹⢶⠖⣤⣾⡿ ⣛⣥⣬⣭⣥⣤⠙⠿⢷⣶⣦⡭         ",
            "⠎⣉⠛⡈⣴⣾⣟⠻⣿⡶⢿⣿⡾⢃⠮⢍⣉⠉⣒⠲⢶⣾⠇⣴⡆⢩⡻         ",
        ),
        shell_label=" Shell:",
    ),
    "-b": _Layout(
        (
            "⣿⣿⠿⠛⠋⣀⡒⠒⢄⣭⠭⠍⠿⠿⠿⠿⠿⡏⣭⡛⣭⣉⠝⠻⢿         ",
            "⣿⡇⢰⢸⠘⣨⣵⡆⠠⢀⢤⡶⢒⣶⡲⣦⢄⡀⢉⢉⣐⠐⣮⠴⠌         ",
            "⣿⠟⣂⣤⣬⠭⠁⢀⡞⢡⠟⣵⣿⣿⣿⢸⣧⡻⡌⣨⠛⠻⠂⠠⠧         ",
            "⠿⠋⣡⠶⣫⣵⢠⣟⠬⠴⢦⡸⣿⠟⢏⣸⣧⣷⣿⠿⢸⢸⣄⢿⣷         ",
            "⠏⢈⡵⢟⣫⡅⢾⡏⣎⣿⣣⣿⣶⣾⣏⢶⡶⢈⠝ ⡱⡀⠙⠷⣍         ",
            "⢃⡀⠘⠿⠿⢳⡈⠳⣝⠻⠿⣯⣉⣽⡿⠿⣛⡅⠘⣷⡝⣢⣤⣤⣿         ",
            "⣘⣛⣓⣶⠄⢹⣿⠟⣳⠖⣒⣦⣶⣾⡇⡩⠉⣁⣐⠟⠧⡋⠆⠆⣬         ",
            "⣿⣟⣉⣿⣿⣿⠫⠈⣁⣈⣉⣉⣉⣉⠈⠚⠻⠿⠻⠂⢱⣂⣠⣿⣛         ",
            "⣿⠛⢙⣿⣿⢏⡜⠼⣿⣿⠻⣿⣿⠿⣿⡀⡈⢿⣿⣝⢌⠻⣿⣿⡟         ",
            "⣿⣿⣿⠟⣡⣾⠘⡀⣉⡉⣀⣉⠁⠐⢛⣛⡀⢱⡝⣿⣷⣥⡘⢿⣿         ",
            "⢿⢟⣡⣾⡿⣱⣿⣼⡿⣼⣿⣿⢜⣿⣎⢷⣴⡆⣿⣮⡻⣿⣿⣷⣌         ",
        )
    ),
    "-c": _Layout(
        (
            "⣿⣿⣿⣿⠿⢛⢋⣡⢄⡶⣲⣖⣶⣶⠆⡤⣔⢶⣶⣶⣌⣍⣛⠻⢿⣿⣿         ",
            "⣿⣿⠟⣡⢃⣷⣿⣵⣿⣾⠟⠸⢻⣿⡜⣿⣜⣗⢝⠻⣟⢝⢿⡳⢕⡝⣿         ",
            "⣿⢯⡸⢳⡿⣿⣿⡟⡟⠄⣼⣆⠫⣛⢾⢞⢮⡛⠿⡭⡊⠳⡃⣻⡜⣞⡜         ",
            "⡟⢀⠋⣿⡇⡟⢸⢱⡇⢰⣿⣿⣥⡈⠡⠑⠳⢉⠊⠈⠌ ⡇⠳⢧⢹⠃         ",
            "⣧⠸⠰⢿⣧⢇⠸ ⡁⣌⠋⠋⢽⣿⣶⣴⣶⣦⢔⡈⠁⠢⡀ ⡆⢸⡀         ",
            "⣿  ⣏⣿⣾ ⢘⡄⠩⣤⡤⢠⣿⣿⣿⣿⣿⣄⣶⣖⣀⣧⠐⢰⡆⡇         ",
            "⣿⢀⡏⣭⢊⢿⢧⡈⢿⣯⣿⣿⣿⣯⣉⣉⣽⣿⣿⣿⣾⠟⠁⣾⠇⠇⢱         ",
            "⠏⣾⣇⡿⣀⢣⠆⢃⢀⡠⢈⣭⣷⣿⣭⠉⣽⣶⣶⡄ ⢀⣾⣿⢀⢸⣇         ",
            "⣐⣿⣻⡿⣣⢠ ⠈⢠⠏⡆⣿⣿⣿⣿⢸⣿⣿⣿⡟ ⢸⡿⠁⠈⣿⣟         ",
            "⠑⢇⠿⣿⠿⠋  ⠓⢠⡸⠿⢿⣿⠃⠈⣿⣿⣿⠇⡆⠘⢧⢤⣰⡇⡿         ",
            "⠈⠷⡀⣄⢲⡀  ⢰⣼⠔⡋⠤⠔⠂⠐⠡⠭⢙⢰⡄ ⠈⠣⠛⠁⠁          ",
        )
    ),
}

_DEFAULT_LAYOUT = _Layout(
    (
        "⣿⣿⢀⣯⢹⣷⣶⣬⡉⠥⣂⠤⣒⣀⠲⠆⡒⢬⠍⣩⣴⣾⣿⡿⣩⣆⢻         ",
        "⣿⡇⠼⠿⣦⠹⣿⣿⠏⣼⢃⠚⢛⣉⣁⣈⣐⣥⣾⣿⣿⣿⠟⢱⡿⢿⢸         ",
        "⣿⠰⣾⣷⣴⡶⢘⣫⣤⠙⠂⠩⢽⣿⣿⢻⣿⢿⣿⣿⣭⡋⠾⢷⣶⡶⢸         ",
        "⠅⠺⢿⡥⢊⣴⣿⣿⢃⣾⣿⣾⣿⣿⡟⢸⣿⣧⡙⢿⣿⣿⣷⣄⠺⣷⢼         ",
        "⣼⣶⠌⣴⣿⣿⣿⠃⣸⣿⣿⣿⣿⣿⣦⢸⣿⣿⣿⣦⢻⣿⣿⣿⣷⡐⢰         ",
        "⠿⠁⣿⣿⣿⡇⢈⣴⣌⠻⡈⠻⣿⣿⣿⡙⠢⠛⢿⣿⣟⠈⣿⡿⣿⣿⡄         ",
        "⣾⡄⣿⣿⣿⡇⣿⠿⠓⣀⡀⠈⣦⣭⣍⣉⡀⡀⡀⠈⢭⠁⣤⣰⣿⣿⠃         ",
        "⣿⣷⡘ ⠻⣧⠨⣰⡘⢗⡚⢸⣿⡿⣿⣿⡅⢃⡸⢰⡤⢠⣿⡟⠻⠋⣼         ",
        "⣿⣟⢿⢠⡤⢦⡥⠸⠷⣶⣲⣿⡿⠿⢿⣿⣷⣶⣶⡏⢐⡛⣋⡄⠶⣹⣿         ",
        "⣬⡙⠆⠢⠁⠶⠖⣿⡆⠭⠝⠛⠛⠒⠛⠛⢛⡩⠁ ⢺⠿⠿⠇⣼⣿⡷         ",
    )
)


@dataclass(frozen=True)
class SystemInfo:
    """Everything the report shows."""

    hostname: str
    os_type: str
    os_release: str
    shell: str
    uptime: int | UptimeError
    memory: MemoryStats | None
    swap: MemoryStats | None
    ip_address: str


@dataclass(frozen=True)
class _ErrorLine:
    text: str


def _paint(text: str, color: str) -> str:
    return f"{color}{text}{_RESET}"


def collect_info() -> SystemInfo:
    """Gather the information shown by the report."""
    try:
        uptime: int | UptimeError = get_uptime()
    except UptimeError as exc:
        uptime = exc
    return SystemInfo(
        hostname=get_hostname(),
        os_type=platform.system(),
        os_release=platform.release(),
        shell=get_shell(),
        uptime=uptime,
        memory=get_memory_info(),
        swap=get_swap_info(),
        ip_address=get_ip_address(),
    )


def render(variant: str | None, info: SystemInfo) -> tuple[str, str]:
    """Return the report's standard output and standard error text.

    ``variant`` is a picture flag ("-a", "-b", "-c"); anything else selects
    the default picture.
    """
    layout = _LAYOUTS.get(variant, _DEFAULT_LAYOUT) if variant else _DEFAULT_LAYOUT
    art = [_paint(line, color) for line, color in zip(layout.art, _ART_COLORS)]

    if isinstance(info.uptime, UptimeError):
        uptime_row: str | _ErrorLine = _ErrorLine(
            f"{_paint('Uptime:', _BLUE)}        {_paint(str(info.uptime), _BLUE)}"
        )
    else:
        uptime_row = (
            f"{_paint('Uptime:', _BLUE)}        "
            f"{_paint(format_uptime(info.uptime), _BLUE)}"
        )

    rows: list[str | _ErrorLine | None] = [
        "".join(_paint(ch, color) for ch, color in zip(_TITLE, _TITLE_COLORS)),
        _paint("-" * 24, _CYAN),
        f"{_paint('Hostname:', _CYAN)}      {_paint(info.hostname, _CYAN)}",
        f"{_paint('OS Type:', _MAGENTA)}       {_paint(info.os_type, _MAGENTA)}",
        f"{_paint('Kernel:', _MAGENTA)}        {_paint(info.os_release, _MAGENTA)}",
        f"{_paint(layout.shell_label, _MAGENTA)}         {_paint(info.shell, _MAGENTA)}",
        uptime_row,
        None if info.memory is None else f"{_paint('Memory Usage:', _BLUE)}  {info.memory}",
        None if info.swap is None else f"{_paint('Swap Usage:', _BLUE)}    {info.swap}",
        f"{_paint('IP Address:', _GREEN)}    {_paint(info.ip_address, _GREEN)}",
    ]

    out: list[str] = []
    err: list[str] = []
    for art_line, row in zip(art, rows):
        out.append(art_line)
        if isinstance(row, _ErrorLine):
            err.append(row.text + "\n")
        elif row is not None:
            out.append(row + "\n")
    if len(art) > len(rows):
        out.append(art[len(rows)] + "\n")
    return "".join(out), "".join(err)


def main(argv: list[str] | None = None) -> int:
    """Print the system report."""
    args = sys.argv[1:] if argv is None else argv
    variant = args[0] if args else None
    out, err = render(variant, collect_info())
    sys.stdout.write(out)
    sys.stderr.write(err)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())