"""Terminal system information fetcher: hostname, OS, shell, uptime, memory, swap and IP next to a braille-art logo."""

__version__ = "0.1.0"