"""Shared fixtures."""

import pytest
from starlette.testclient import TestClient

from tests.gate_helpers import build_gated_app


@pytest.fixture
def client() -> TestClient:
    """Test client for the gated app, not following redirects."""
    return TestClient(build_gated_app(), follow_redirects=False)
