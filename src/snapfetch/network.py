"""Local address discovery for snapfetch."""

import logging
import socket

from snapfetch.config import PROBE

logger = logging.getLogger(__name__)

BIND_FAILED = "Failed to bind to a socket."
UNREACHABLE = "Network unreachable."
NO_LOCAL_ADDRESS = "Failed to get local address."


def probe_local_ip(target: tuple[str, int] = PROBE.target) -> str:
    """
    Return the local IP the OS would use to reach ``target``.

    Connecting a UDP socket only selects a route and source address, so no
    packet is sent. Never raises: failures are reported as one of the
    diagnostic strings above.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        logger.debug("Socket creation failed: %s", exc)
        return BIND_FAILED

    with sock:
        try:
            sock.bind(PROBE.bind_address)
        except OSError as exc:
            logger.debug("Socket bind failed: %s", exc)
            return BIND_FAILED

        try:
            sock.connect(target)
        except OSError as exc:
            logger.debug("No route to %s:%d: %s", target[0], target[1], exc)
            return UNREACHABLE

        try:
            address = sock.getsockname()[0]
        except OSError as exc:
            logger.debug("Reading local address failed: %s", exc)
            return NO_LOCAL_ADDRESS

    return str(address)
