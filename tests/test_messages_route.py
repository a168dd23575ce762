from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server.app import app
from server.config import get_settings
from server.routes.messages import get_messaging_client
from sms_client import MessagingClient, is_transport_ready
from tests.fixtures.transport import StubTransport


def use_transport(transport: StubTransport) -> None:
    app.dependency_overrides[get_messaging_client] = lambda: MessagingClient(
        "ACtest", "test-token", transport=transport
    )


def test_startup_and_shutdown_manage_shared_transport() -> None:
    with TestClient(app):
        assert is_transport_ready()
    assert not is_transport_ready()


def test_send_success(client: TestClient) -> None:
    transport = StubTransport(status_code=201, body=b'{"sid": "SM1"}')
    use_transport(transport)

    r = client.post(
        "/api/v1/messages",
        json={"to": "+15551230000", "from": "+15550001111", "body": "Hello", "verbose": True},
    )

    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["result"]["status_code"] == 201
    assert data["result"]["detail"] == '{"sid": "SM1"}'
    assert transport.last.params["From"] == "+15550001111"


def test_sender_defaults_to_configured_number(client: TestClient) -> None:
    transport = StubTransport()
    use_transport(transport)

    r = client.post("/api/v1/messages", json={"to": "+15551230000", "body": "Hi"})

    assert r.status_code == 200
    assert transport.last.params["From"] == "+15557650000"


def test_missing_sender_is_422(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TWILIO_FROM_NUMBER")
    get_settings.cache_clear()
    transport = StubTransport()
    use_transport(transport)

    r = client.post("/api/v1/messages", json={"to": "+1", "body": "Hi"})

    assert r.status_code == 422
    assert r.json()["ok"] is False
    assert transport.calls == []


def test_mms_passes_media_url(client: TestClient) -> None:
    transport = StubTransport()
    use_transport(transport)

    r = client.post(
        "/api/v1/messages",
        json={"to": "+1", "body": "Pic", "media_url": "https://example.com/a.jpg"},
    )

    assert r.status_code == 200
    assert transport.last.params["MediaUrl"] == "https://example.com/a.jpg"


def test_too_long_body_is_422(client: TestClient) -> None:
    transport = StubTransport()
    use_transport(transport)

    r = client.post("/api/v1/messages", json={"to": "+1", "body": "x" * 1601})

    assert r.status_code == 422
    assert "1601 characters" in r.json()["error"]
    assert transport.calls == []


def test_provider_rejection_is_502(client: TestClient) -> None:
    use_transport(StubTransport(status_code=400, body=b"Bad Request"))

    r = client.post("/api/v1/messages", json={"to": "+1", "body": "Hi", "verbose": True})

    assert r.status_code == 502
    assert r.json() == {"ok": False, "error": "Twilio returned HTTP 400: Bad Request"}


def test_transport_failure_is_502(client: TestClient) -> None:
    use_transport(StubTransport(error="Connection refused"))

    r = client.post("/api/v1/messages", json={"to": "+1", "body": "Hi"})

    assert r.status_code == 502
    assert r.json()["error"] == "Send error: Connection refused"


def test_missing_credentials_is_503(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TWILIO_AUTH_TOKEN")
    get_settings.cache_clear()

    r = client.post("/api/v1/messages", json={"to": "+1", "body": "Hi"})

    assert r.status_code == 503
    assert "TWILIO_AUTH_TOKEN" in r.json()["error"]


def test_invalid_payload_is_422(client: TestClient) -> None:
    r = client.post("/api/v1/messages", json={"body": "no recipient"})

    assert r.status_code == 422
    assert r.json()["error"] == "Invalid request"


def test_unexpected_error_is_500() -> None:
    class ExplodingClient:
        def send_message(self, *args, **kwargs):
            raise RuntimeError("boom")

    app.dependency_overrides[get_messaging_client] = lambda: ExplodingClient()

    with TestClient(app, raise_server_exceptions=False) as test_client:
        r = test_client.post("/api/v1/messages", json={"to": "+1", "body": "Hi"})

    assert r.status_code == 500
    assert r.json() == {"ok": False, "error": "Internal server error"}
