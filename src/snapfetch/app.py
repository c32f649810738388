"""snapfetch - command line entry point."""

import logging
import os
import sys

from rich.console import Console
from rich.control import Control

from snapfetch.config import APP_NAME, APP_VERSION, LOG_LEVEL_VARIABLE
from snapfetch.facts import collect_snapshot
from snapfetch.report import build_report, render

logger = logging.getLogger(__name__)

USAGE = f"""Usage: {APP_NAME} [OPTION]

Print a short color-coded summary of this system.

Options:
  -h, --help       Show this help and exit
  -v, --version    Show version information and exit"""


def configure_logging() -> None:
    """Send log records to stderr at the level named in the environment."""
    level_name = os.environ.get(LOG_LEVEL_VARIABLE, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def show_report(console: Console) -> None:
    """Clear the screen and print the snapshot report."""
    if console.is_terminal:
        console.control(Control.clear(), Control.move_to(0, 0))
    snapshot = collect_snapshot()
    logger.debug("Collected snapshot for %s", snapshot.hostname)
    render(build_report(snapshot), console)
    console.file.write("\n")


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Entry point for the snapfetch command."""
    args = sys.argv[1:] if argv is None else argv
    if console is None:
        console = Console()
    configure_logging()

    # Only a single argument is treated as a flag
    if len(args) == 1:
        flag = args[0]
        if flag in ("-h", "--help"):
            console.print(USAGE, markup=False, highlight=False)
        elif flag in ("-v", "--version"):
            console.print(f"{APP_NAME} {APP_VERSION}", markup=False, highlight=False)
        else:
            console.print(f"Unknown flag: {flag}", markup=False, highlight=False)
        return 0

    show_report(console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
