"""Static configuration values for snapfetch."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProbeConfig:
    """Addresses used by the local address probe."""

    bind_address: tuple[str, int] = ("0.0.0.0", 0)  # wildcard, ephemeral port
    target: tuple[str, int] = ("8.8.8.8", 80)


@dataclass(frozen=True)
class ReportStyle:
    """Colors and glyphs used when rendering the report."""

    arrow: str = "=>"
    arrow_color: str = "rgb(112,112,112)"
    header_color: str = "bright_blue"
    rule_char: str = "="
    label_colors: dict[str, str] = field(
        default_factory=lambda: {
            "OS": "bright_red",
            "CPU": "bright_green",
            "Kernel": "bright_yellow",
            "Memory": "bright_magenta",
            "Swap": "bright_cyan",
            "Ip": "bright_magenta",
            "Uptime": "bright_red",
            "Shell": "bright_green",
            "Term": "bright_yellow",
            "De/Wm": "bright_cyan",
        }
    )


APP_NAME = "snapfetch"
APP_VERSION = "0.1.0"

UNITS = ("B", "KB", "MB", "GB", "TB")
UNIT_STEP = 1000

DESKTOP_VARIABLES = ("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION", "GDMSESSION")
LOG_LEVEL_VARIABLE = "SNAPFETCH_LOG_LEVEL"
UNKNOWN = "unknown"

PROBE = ProbeConfig()
STYLE = ReportStyle()
