"""Pytest configuration and fixtures."""
import pytest

from euplatesc import EuPlatesc
from euplatesc.config import reset_settings
from support import MERCHANT_ID, SECRET_KEY, UAPI_KEY, USER_KEY, RecordingTransport


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from EUPLATESC_* variables of the host environment."""
    for name in (
        "EUPLATESC_MERCHANT_ID",
        "EUPLATESC_SECRET_KEY",
        "EUPLATESC_TEST_MODE",
        "EUPLATESC_USER_KEY",
        "EUPLATESC_UAPI_KEY",
        "EUPLATESC_TIMEOUT",
        "EUPLATESC_SLOW_REQUEST_THRESHOLD",
        "EUPLATESC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def recorder():
    """Transport answering every request with a successful refund/capture reply."""
    return RecordingTransport(reply={"success": {"success": "1"}})


@pytest.fixture
def make_gateway():
    """Factory for gateways wired to a RecordingTransport."""

    def factory(recorder=None, web_service=True, **kwargs):
        options = {}
        if recorder is not None:
            options["transport"] = recorder.transport
        if web_service:
            options.update(user_key=USER_KEY, uapi_key=UAPI_KEY)
        options.update(kwargs)
        return EuPlatesc(merchant_id=MERCHANT_ID, secret_key=SECRET_KEY, **options)

    return factory


@pytest.fixture
def gateway(make_gateway, recorder):
    return make_gateway(recorder)
