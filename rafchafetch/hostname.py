"""Host name lookup."""

import socket


def get_hostname() -> str:
    """Return the machine's host name, or "N/A" if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError:
        return "N/A"