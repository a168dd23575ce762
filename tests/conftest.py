from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from server.app import app
from server.config import get_settings
from sms_client.config import get_client_settings
from sms_client.services.transport import shutdown_transport


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("ENV", "test")
    # Safe defaults for the Twilio client
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACtest")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "test-token")
    monkeypatch.setenv("TWILIO_FROM_NUMBER", "+15557650000")
    monkeypatch.delenv("TWILIO_API_BASE_URL", raising=False)
    monkeypatch.delenv("TWILIO_API_VERSION", raising=False)
    monkeypatch.delenv("SMS_HTTP_TIMEOUT", raising=False)
    get_settings.cache_clear()
    get_client_settings.cache_clear()
    yield
    shutdown_transport()
    app.dependency_overrides.clear()
    get_settings.cache_clear()
    get_client_settings.cache_clear()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
