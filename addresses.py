"""
addresses.py

Local network address lookup for the scene loader.
"""

from __future__ import annotations

import socket

import psutil

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def local_addresses() -> frozenset[str]:
    """
    Return every IPv4 / IPv6 address currently bound to a local interface,
    as text exactly as the OS reports it (loopback included).
    """
    found: set[str] = set()
    for nic, addrs in psutil.net_if_addrs().items():
        for a in addrs:
            if a.family in _IP_FAMILIES and a.address:
                found.add(a.address)
    return frozenset(found)