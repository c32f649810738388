"""Data models for snapfetch."""

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """How a report line is rendered."""

    HEADER = "header"
    RULE = "rule"
    FIELD = "field"
    NOTICE = "notice"
    PALETTE = "palette"


@dataclass(slots=True, frozen=True)
class HostSnapshot:
    """Immutable snapshot of the host facts shown in one report."""

    username: str | None
    hostname: str
    os_name: str
    os_version: str
    kernel_version: str
    cpu_brand: str | None
    memory_total: int  # Bytes
    memory_used: int  # Bytes
    swap_total: int  # Bytes
    swap_used: int  # Bytes
    uptime_seconds: int
    local_ip: str  # Address or probe diagnostic
    shell: str | None
    term: str | None
    desktop: str | None


@dataclass(slots=True, frozen=True)
class DisplayLine:
    """One line of the rendered report."""

    label: str
    value: str
    color: str = ""
    kind: LineKind = LineKind.FIELD
