"""Report building and rendering for snapfetch."""

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style
from rich.text import Text

from snapfetch.config import STYLE
from snapfetch.formatting import (
    bright_palette,
    format_uptime,
    normal_palette,
    scale_bytes,
    shell_name,
)
from snapfetch.models import DisplayLine, HostSnapshot, LineKind


def missing_variable(name: str) -> str:
    """Notice shown in place of a line whose variable is unset."""
    return f"{name} environment variable is not set."


def header_rule(header: str) -> str:
    """Underline for the header, one rule character per character of text."""
    return STYLE.rule_char * len(header)


def _field(label: str, value: str) -> DisplayLine:
    return DisplayLine(label, value, STYLE.label_colors[label], LineKind.FIELD)


def _notice(variable: str) -> DisplayLine:
    return DisplayLine("", missing_variable(variable), kind=LineKind.NOTICE)


def build_report(snapshot: HostSnapshot) -> list[DisplayLine]:
    """Build the ordered report lines for a snapshot."""
    lines: list[DisplayLine] = []

    if snapshot.username is not None:
        header = f"{snapshot.username}@{snapshot.hostname}"
        lines.append(DisplayLine("", header, STYLE.header_color, LineKind.HEADER))
        lines.append(DisplayLine("", header_rule(header), kind=LineKind.RULE))
    else:
        lines.append(_notice("USER"))

    lines.append(_field("OS", f"{snapshot.os_name} {snapshot.os_version}"))
    if snapshot.cpu_brand:
        lines.append(_field("CPU", snapshot.cpu_brand.rstrip()))
    lines.append(_field("Kernel", snapshot.kernel_version))

    # used can exceed total on a misreporting host
    memory_free = max(snapshot.memory_total - snapshot.memory_used, 0)
    lines.append(
        _field("Memory", f"{scale_bytes(memory_free)}/{scale_bytes(snapshot.memory_total)}")
    )
    lines.append(
        _field("Swap", f"{scale_bytes(snapshot.swap_used)}/{scale_bytes(snapshot.swap_total)}")
    )
    lines.append(_field("Ip", snapshot.local_ip))
    lines.append(_field("Uptime", format_uptime(snapshot.uptime_seconds)))

    if snapshot.shell is not None:
        lines.append(_field("Shell", shell_name(snapshot.shell)))
    else:
        lines.append(_notice("SHELL"))

    if snapshot.term is not None:
        lines.append(_field("Term", snapshot.term))
    else:
        lines.append(_notice("TERM"))

    if snapshot.desktop is not None:
        lines.append(_field("De/Wm", snapshot.desktop))

    lines.append(DisplayLine("", normal_palette(), kind=LineKind.PALETTE))
    lines.append(DisplayLine("", bright_palette(), kind=LineKind.PALETTE))
    return lines


def _styled(text: str, style: str, color_system: ColorSystem | None) -> str:
    if not style:
        return text
    return Style.parse(style).render(text, color_system=color_system)


def format_line(line: DisplayLine, color_system: ColorSystem | None = None) -> str:
    """
    Format a display line as terminal text.

    Field lines are ``<label>\\t<arrow>\\t<value>`` with literal tabs. With no
    color system all styling is dropped, palettes included.
    """
    if line.kind is LineKind.FIELD:
        return "\t".join(
            [
                _styled(line.label, line.color, color_system),
                _styled(STYLE.arrow, STYLE.arrow_color, color_system),
                line.value,
            ]
        )
    if line.kind is LineKind.PALETTE:
        return line.value if color_system is not None else Text.from_ansi(line.value).plain
    return _styled(line.value, line.color, color_system)


def render(lines: list[DisplayLine], console: Console) -> None:
    """Write report lines to the console's file, unwrapped."""
    color_system = COLOR_SYSTEMS.get(console.color_system or "")
    for line in lines:
        console.file.write(format_line(line, color_system) + "\n")
    console.file.flush()
