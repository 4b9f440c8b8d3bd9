"""HTTP behavior of the access gate routes and middleware."""

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from tests.gate_helpers import BASE_URL, TEST_TOKEN, FakeQrRenderer, build_gated_app
from trainfresh.adapters.config import AppConfig
from trainfresh.adapters.web.gate_middleware import WS_POLICY_VIOLATION, is_public_path


class TestAccessRoute:
    """Tests for GET /access/{token}."""

    def test_when_token_valid_then_sets_cookie_and_redirects(self, client: TestClient) -> None:
        """Given the right token, when following the QR link, then cookie is set and redirected."""
        response = client.get(f"/access/{TEST_TOKEN}")

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        set_cookie = response.headers["set-cookie"]
        assert f"tf_session={TEST_TOKEN}" in set_cookie
        assert "HttpOnly" in set_cookie
        assert "Max-Age=3600" in set_cookie
        assert "Path=/" in set_cookie

    def test_when_token_invalid_then_forbidden(self, client: TestClient) -> None:
        """Given a wrong token, when following the link, then 403 with invalid code text."""
        response = client.get("/access/nope")

        assert response.status_code == 403
        assert "Invalid or expired QR code." in response.text
        assert "set-cookie" not in response.headers

    def test_after_access_the_app_is_reachable(self, client: TestClient) -> None:
        """Given a granted session, when opening the app, then it is served."""
        client.get(f"/access/{TEST_TOKEN}")

        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "passenger app"


class TestProtectedContent:
    """Tests for the gate in front of everything else."""

    def test_when_no_cookie_then_denial_page(self, client: TestClient) -> None:
        """Given no session, when opening the app, then the scan-QR page is shown."""
        response = client.get("/")

        assert response.status_code == 403
        assert "scan the QR code" in response.text
        assert "Access Restricted" in response.text

    @pytest.mark.parametrize(
        "cookie",
        ["tf_session=wrong", f"other={TEST_TOKEN}", "garbage;;=", f"tf_session={TEST_TOKEN}="],
    )
    def test_when_cookie_wrong_then_denial_page(self, cookie: str) -> None:
        """Given a wrong or malformed cookie, when opening the app, then denied."""
        client = TestClient(build_gated_app(), follow_redirects=False)

        response = client.get("/", headers={"Cookie": cookie})

        assert response.status_code == 403

    def test_when_cookie_valid_then_allowed(self) -> None:
        """Given a valid cookie among others, when opening the app, then allowed."""
        client = TestClient(build_gated_app())

        response = client.get("/", headers={"Cookie": f"a=1; tf_session={TEST_TOKEN}"})

        assert response.status_code == 200

    def test_unknown_paths_are_gated_too(self, client: TestClient) -> None:
        """Given no session, when requesting any other path, then denied before routing."""
        assert client.get("/css/trainfresh.css").status_code == 403

    def test_websocket_without_session_is_closed(self, client: TestClient) -> None:
        """Given no session, when opening the LiveView socket, then it is refused."""
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/live/websocket"):
                pass

        assert exc_info.value.code == WS_POLICY_VIOLATION

    def test_websocket_with_session_is_accepted(self) -> None:
        """Given a session cookie, when opening the socket, then it connects."""
        client = TestClient(build_gated_app())

        with client.websocket_connect(
            "/live/websocket", headers={"Cookie": f"tf_session={TEST_TOKEN}"}
        ) as websocket:
            assert websocket.receive_text() == "hello"


class TestAdminQrRoute:
    """Tests for GET /qr."""

    def test_qr_page_shows_image_and_access_url(self) -> None:
        """Given a working renderer, when opening /qr, then image and URL are embedded."""
        renderer = FakeQrRenderer()
        client = TestClient(build_gated_app(renderer))

        response = client.get("/qr")

        access_url = f"{BASE_URL}/access/{TEST_TOKEN}"
        assert response.status_code == 200
        assert "data:image/png;base64,AAAA" in response.text
        assert access_url in response.text
        assert "192.168.1.5:3000" in response.text
        assert renderer.rendered == [access_url]

    def test_qr_failure_surfaces_as_500(self) -> None:
        """Given a failing renderer, when opening /qr, then the raw error is returned."""
        client = TestClient(build_gated_app(FakeQrRenderer(fail_with="boom")))

        response = client.get("/qr")

        assert response.status_code == 500
        assert response.text == "Error generating QR: boom"

    def test_qr_guard_rejects_wrong_admin_token(self) -> None:
        """Given a configured admin token, when opening /qr without it, then forbidden."""
        config = AppConfig(_env_file=None, access_token=TEST_TOKEN, qr_admin_token="staff")
        client = TestClient(build_gated_app(config=config))

        assert client.get("/qr").status_code == 403
        assert client.get("/qr", headers={"X-Admin-Token": "nope"}).status_code == 403
        assert client.get("/qr", headers={"X-Admin-Token": "staff"}).status_code == 200
        assert client.get("/qr?token=staff").status_code == 200


def test_healthz_is_public(client: TestClient) -> None:
    """Given no session, when checking health, then Ok is returned."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "Ok"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/access/abc", True),
        ("/qr", True),
        ("/healthz", True),
        ("/", False),
        ("/qr/extra", False),
        ("/accessx", False),
        ("/access/", False),
        ("/access/abc/extra", False),
        ("/access/../css/trainfresh.css", False),
        ("/access/./abc", False),
        ("/access/..", False),
        ("/live/websocket", False),
    ],
)
def test_is_public_path(path: str, expected: bool) -> None:
    """Given a path, when classifying, then only gate routes are public."""
    assert is_public_path(path) is expected
