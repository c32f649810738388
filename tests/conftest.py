"""Shared fixtures for snapfetch tests."""

import pytest

from snapfetch.models import HostSnapshot

SNAPSHOT_DEFAULTS = {
    "username": "alice",
    "hostname": "box",
    "os_name": "Debian GNU/Linux",
    "os_version": "12",
    "kernel_version": "6.1.0-18-amd64",
    "cpu_brand": "AMD Ryzen 7 5800X 8-Core Processor",
    "memory_total": 16_000_000_000,
    "memory_used": 4_000_000_000,
    "swap_total": 2_000_000_000,
    "swap_used": 0,
    "uptime_seconds": 3661,
    "local_ip": "192.168.1.20",
    "shell": "/bin/bash",
    "term": "xterm-256color",
    "desktop": "GNOME",
}


@pytest.fixture
def make_snapshot():
    """Factory for HostSnapshot with overridable fields."""

    def factory(**overrides) -> HostSnapshot:
        return HostSnapshot(**{**SNAPSHOT_DEFAULTS, **overrides})

    return factory
