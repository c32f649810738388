"""Pure formatting helpers: byte scaling, uptime and color swatches."""

from snapfetch.config import UNIT_STEP, UNITS

RESET = "\x1b[0m"
BLOCK = "   "


def scale_bytes(size: int) -> str:
    """Format a byte count with decimal units, e.g. ``1.50 MB``."""
    value = float(max(size, 0))
    index = 0
    while value >= UNIT_STEP and index < len(UNITS) - 1:
        value /= UNIT_STEP
        index += 1
    return f"{value:.2f} {UNITS[index]}"


def format_uptime(total_seconds: int) -> str:
    """
    Format seconds as ``Xd Xh Xm Xs``.

    A unit is shown once it or any larger unit is non-zero; seconds are
    always shown.
    """
    total_seconds = max(int(total_seconds), 0)
    days = total_seconds // 86400
    hours = (total_seconds % 86400) // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if days > 0 or hours > 0:
        parts.append(f"{hours}h")
    if days > 0 or hours > 0 or minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


def _background(index: int) -> str:
    if index < 8:
        return f"\x1b[4{index}m"
    return f"\x1b[48;5;{index}m"


def render_palette(start: int, end: int) -> str:
    """Return background-colored blocks for palette indices ``start..end-1``."""
    blocks = [f"{_background(index)}{BLOCK}" for index in range(start, end)]
    return "".join(blocks) + RESET


def normal_palette() -> str:
    """Blocks for the eight normal colors."""
    return render_palette(0, 8)


def bright_palette() -> str:
    """Blocks for the eight bright colors."""
    return render_palette(8, 16)


def shell_name(path: str) -> str:
    """Return the last path segment of a shell path."""
    return path.rsplit("/", 1)[-1]
