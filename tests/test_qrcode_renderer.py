"""Tests for the qrcode-based renderer."""

import base64
from pathlib import Path
from unittest.mock import patch

import pytest

from trainfresh.adapters.qr import QrCodeRenderer
from trainfresh.domain.errors import QrRenderingError

ACCESS_URL = "http://192.168.1.5:3000/access/trainfresh2026"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_data_url_contains_png() -> None:
    """Given a URL, when rendering for the admin page, then a PNG data URL is returned."""
    data_url = QrCodeRenderer().to_data_url(ACCESS_URL)

    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix) :]).startswith(PNG_SIGNATURE)


def test_terminal_rendering_is_multiline_text() -> None:
    """Given a URL, when rendering for the terminal, then several lines of art are returned."""
    art = QrCodeRenderer().to_terminal(ACCESS_URL)

    assert len(art.strip().splitlines()) > 10


def test_save_png_writes_file(tmp_path: Path) -> None:
    """Given a path, when saving, then a PNG file is written there."""
    target = tmp_path / "qr.png"

    saved = QrCodeRenderer().save_png(ACCESS_URL, target)

    assert saved == target
    assert target.read_bytes().startswith(PNG_SIGNATURE)


def test_save_png_to_missing_directory_raises_rendering_error(tmp_path: Path) -> None:
    """Given an unwritable path, when saving, then QrRenderingError is raised."""
    with pytest.raises(QrRenderingError):
        QrCodeRenderer().save_png(ACCESS_URL, tmp_path / "missing" / "qr.png")


def test_library_failure_is_wrapped() -> None:
    """Given the qrcode library fails, when rendering, then QrRenderingError carries the message."""
    with (
        patch(
            "trainfresh.adapters.qr.qrcode_renderer.qrcode.QRCode",
            side_effect=ValueError("data too big"),
        ),
        pytest.raises(QrRenderingError, match="data too big"),
    ):
        QrCodeRenderer().to_data_url(ACCESS_URL)
