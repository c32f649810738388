"""Host facts collection for snapfetch."""

import logging
import os
import platform
import socket
import time
from collections.abc import Callable, Mapping
from typing import Protocol

import psutil

from snapfetch.config import DESKTOP_VARIABLES, UNKNOWN
from snapfetch.models import HostSnapshot
from snapfetch.network import probe_local_ip

logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"


class FactsSource(Protocol):
    """Read-only source of host facts."""

    def hostname(self) -> str | None: ...

    def os_name(self) -> str | None: ...

    def os_version(self) -> str | None: ...

    def kernel_version(self) -> str | None: ...

    def cpu_brand(self) -> str | None: ...

    def memory(self) -> tuple[int, int]: ...

    def swap(self) -> tuple[int, int]: ...

    def uptime(self) -> int: ...


class PsutilFacts:
    """
    Facts source backed by psutil and the platform module.

    Each fact is read independently; a failure to read one is logged and
    reported as missing rather than raised.
    """

    def __init__(self, cpuinfo_path: str = CPUINFO_PATH) -> None:
        self._cpuinfo_path = cpuinfo_path
        self._os_release: dict[str, str] | None = None

    def _release(self) -> dict[str, str]:
        if self._os_release is None:
            try:
                self._os_release = platform.freedesktop_os_release()
            except OSError:
                self._os_release = {}
        return self._os_release

    def hostname(self) -> str | None:
        return socket.gethostname() or platform.node() or None

    def os_name(self) -> str | None:
        name = self._release().get("NAME")
        if name:
            return name
        if platform.mac_ver()[0]:
            return "macOS"
        return platform.system() or None

    def os_version(self) -> str | None:
        version = self._release().get("VERSION_ID")
        if version:
            return version
        mac_version = platform.mac_ver()[0]
        if mac_version:
            return mac_version
        return platform.version() or None

    def kernel_version(self) -> str | None:
        return platform.release() or None

    def cpu_brand(self) -> str | None:
        """Brand string of the first logical CPU."""
        try:
            with open(self._cpuinfo_path, encoding="utf-8", errors="replace") as cpuinfo:
                for line in cpuinfo:
                    if line.startswith("model name"):
                        return line.split(":", 1)[1].strip() or None
        except OSError as exc:
            logger.debug("Cannot read %s: %s", self._cpuinfo_path, exc)
        return platform.processor().strip() or None

    def memory(self) -> tuple[int, int]:
        try:
            mem = psutil.virtual_memory()
        except (psutil.Error, OSError) as exc:
            logger.debug("Memory info unavailable: %s", exc)
            return 0, 0
        return mem.total, mem.used

    def swap(self) -> tuple[int, int]:
        try:
            swap = psutil.swap_memory()
        except (psutil.Error, OSError) as exc:
            logger.debug("Swap info unavailable: %s", exc)
            return 0, 0
        return swap.total, swap.used

    def uptime(self) -> int:
        try:
            boot_time = psutil.boot_time()
        except (psutil.Error, OSError) as exc:
            logger.debug("Boot time unavailable: %s", exc)
            return 0
        return int(time.time() - boot_time)


def desktop_environment(environ: Mapping[str, str]) -> str | None:
    """Return the first set desktop-environment variable, if any."""
    for name in DESKTOP_VARIABLES:
        value = environ.get(name)
        if value is not None:
            return value
    return None


def collect_snapshot(
    facts: FactsSource | None = None,
    environ: Mapping[str, str] | None = None,
    probe: Callable[[], str] = probe_local_ip,
) -> HostSnapshot:
    """
    Collect a HostSnapshot from a facts source and an environment mapping.

    Args:
        facts: Host facts provider. Defaults to PsutilFacts.
        environ: Environment variables. Defaults to os.environ.
        probe: Callable returning the local IP or a diagnostic string.
    """
    if facts is None:
        facts = PsutilFacts()
    if environ is None:
        environ = os.environ

    memory_total, memory_used = facts.memory()
    swap_total, swap_used = facts.swap()

    return HostSnapshot(
        username=environ.get("USER"),
        hostname=facts.hostname() or UNKNOWN,
        os_name=facts.os_name() or UNKNOWN,
        os_version=facts.os_version() or UNKNOWN,
        kernel_version=facts.kernel_version() or UNKNOWN,
        cpu_brand=facts.cpu_brand(),
        memory_total=max(memory_total, 0),
        memory_used=max(memory_used, 0),
        swap_total=max(swap_total, 0),
        swap_used=max(swap_used, 0),
        uptime_seconds=max(facts.uptime(), 0),
        local_ip=probe(),
        shell=environ.get("SHELL"),
        term=environ.get("TERM"),
        desktop=desktop_environment(environ),
    )
