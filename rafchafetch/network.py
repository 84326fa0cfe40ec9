"""Discovery of the machine's IPv4 address."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Iterable, Mapping
from typing import Any

import psutil


def first_ipv4(interfaces: Mapping[str, Iterable[Any]]) -> str:
    """Return the first non-loopback IPv4 address among the interfaces.

    ``interfaces`` maps interface names to address records carrying
    ``family`` and ``address`` attributes, as ``psutil.net_if_addrs`` does.
    """
    for addresses in interfaces.values():
        for record in addresses:
            if record.family != socket.AF_INET:
                continue
            try:
                address = ipaddress.IPv4Address(record.address)
            except ValueError:
                continue
            if address.is_loopback:
                continue
            return str(address)
    return "N/A"


def get_ip_address() -> str:
    """Return the machine's first non-loopback IPv4 address, or "N/A"."""
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, RuntimeError):
        return "N/A"
    return first_ipv4(interfaces)