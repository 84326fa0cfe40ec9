# rafchafetch

A small terminal fetch tool. It prints a braille-art logo and, next to it,
a coloured summary of the machine:

- hostname
- OS type and kernel release
- shell
- uptime (`Nd Nh Nm`)
- memory and swap usage, coloured by load
  (green up to 50, yellow up to 75, red above)
- first non-loopback IPv4 address

## Installation

```
pip install .
```

## Usage

```
rafchafetch
```

Other logos can be picked with a flag given as the first argument:

```
rafchafetch -a
rafchafetch -b
rafchafetch -c
```

With any other argument, or none, the default logo is shown.

## Where the values come from

- **Hostname**: the system host name; `N/A` if it cannot be read.
- **OS type / Kernel**: `platform.system()` and `platform.release()`.
- **Shell**: on Unix-like systems the last path component of `$SHELL`; if
  `SHELL` is not set, the output of `sh -c 'echo $0'`, or `unknown` if that
  fails. On Windows `PowerShell` when `PSModulePath` is set and non-empty,
  otherwise the file name from `ComSpec`, or `unknown`.
- **Uptime**: read from `/proc/uptime`; on Windows computed from the boot
  time. If it cannot be read, the error message is written to standard error
  and the uptime line is left out of the report.
- **Memory Usage**: used memory as a percentage of total (total minus
  available on Unix-like systems, total minus free on Windows).
- **Swap Usage**: on Unix-like systems taken from the `Swap` line of
  `free -b`, so it needs the `free` command; on Windows from the system's
  swap figures, shown as a fraction (0 to 1) rather than a percentage.
- **IP Address**: the first IPv4 address of any interface that is not a
  loopback address; `N/A` if there is none.

If memory or swap usage cannot be read, its line is left out.

## Use as a library

The pieces can also be used on their own:

```python
from rafchafetch.uptime import format_uptime, get_uptime, parse_uptime
from rafchafetch.memory import MemoryStats, get_memory_info, get_swap_info, parse_free_swap
from rafchafetch.network import get_ip_address
from rafchafetch.shell import get_shell
from rafchafetch.hostname import get_hostname

print(format_uptime(get_uptime()))   # e.g. "1d 2h 3m"
print(get_memory_info())             # coloured "42.0%"
print(get_ip_address())
print(get_shell({"SHELL": "/bin/zsh"}))  # "zsh"
```

- `rafchafetch.uptime.get_uptime(path=None)` returns whole seconds and raises
  `UptimeError` when the file cannot be read or parsed.
- `rafchafetch.memory.MemoryStats(percent)` renders as a coloured percentage
  with one decimal; `usage_percent(used, total)` returns 0.0 for a zero total.
- `rafchafetch.network.first_ipv4(interfaces)` picks the address from a
  mapping shaped like `psutil.net_if_addrs()`.
- `rafchafetch.cli.collect_info()` gathers everything into a `SystemInfo`,
  and `rafchafetch.cli.render(variant, info)` returns the standard output and
  standard error text of the report as a pair of strings.

## Development

```
pip install -e ".[test]"
pytest
```