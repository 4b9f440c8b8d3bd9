"""Main entry point for the TrainFresh server."""

import asyncio
import logging
import sys
from pathlib import Path

from trainfresh.adapters.config import AppConfig
from trainfresh.adapters.network import get_local_ip
from trainfresh.adapters.qr import QrCodeRenderer
from trainfresh.adapters.web import PyViewWebAdapter
from trainfresh.application.services import AccessGate
from trainfresh.domain.contracts import QrRendererProtocol
from trainfresh.domain.errors import QrRenderingError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

CYAN = "\x1b[36m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
DIM = "\x1b[2m"
RESET = "\x1b[0m"


def print_startup_banner(base_url: str, access_url: str) -> None:
    """Print where the server, the staff page and the passenger link live."""
    print(f"\n{CYAN}╔══════════════════════════════════════════╗")
    print("║       🚆  TrainFresh Server Ready        ║")
    print(f"╚══════════════════════════════════════════╝{RESET}\n")
    print(f"{GREEN}✔ Server running at:{RESET}  {base_url}")
    print(f"{GREEN}✔ QR Admin page at:{RESET}   {base_url}/qr")
    print(f"{GREEN}✔ Passenger access:{RESET}   {access_url}\n")


def publish_qr(qr_renderer: QrRendererProtocol, access_url: str, png_path: str | None) -> None:
    """Print the QR code to the terminal and save a printable copy.

    Both outputs are conveniences; failures are logged and startup goes on.
    """
    try:
        print(f"{YELLOW}Scan this QR with your phone:{RESET}")
        print(qr_renderer.to_terminal(access_url))
    except QrRenderingError as e:
        logger.warning(f"Could not render terminal QR: {e}")

    if png_path:
        try:
            saved = qr_renderer.save_png(access_url, Path(png_path))
            print(f"{GREEN}✔ QR saved as:{RESET}        {saved.resolve()}")
            print(f"{DIM}  Print it and paste it near the toilet for passengers to scan.{RESET}\n")
        except QrRenderingError as e:
            logger.warning(f"Could not save {png_path}: {e}")

    print(f"{DIM}(Open /qr on a tablet/screen inside the coach for live display){RESET}\n")


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    gate = AccessGate(
        config.build_access_token(),
        session_max_age_seconds=config.session_max_age_seconds,
    )
    base_url = config.base_url(get_local_ip())
    access_url = gate.access_url(base_url)
    qr_renderer = QrCodeRenderer()

    print_startup_banner(base_url, access_url)
    publish_qr(qr_renderer, access_url, config.qr_png_path)

    display_adapter = PyViewWebAdapter(gate, qr_renderer, config, base_url)
    try:
        await display_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
