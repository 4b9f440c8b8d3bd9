"""Local network address discovery."""

import logging
import socket

logger = logging.getLogger(__name__)

FALLBACK_ADDRESS = "127.0.0.1"


def get_local_ip() -> str:
    """Return the IPv4 address of the interface used for outbound traffic.

    Connecting a UDP socket sends no packets; it only makes the kernel pick a
    route, which tells us the non-loopback address phones on the same network
    can reach. Falls back to loopback when there is no route.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError as e:
        logger.warning(f"Could not determine local IP, using {FALLBACK_ADDRESS}: {e}")
        return FALLBACK_ADDRESS
    finally:
        sock.close()
    if not address or address.startswith("0."):
        return FALLBACK_ADDRESS
    return address
