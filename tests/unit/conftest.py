"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching the real API.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from hs_order.api.client import OrderApiClient


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that keeps every request it served.

    Usage:
        transport = RecordingTransport(lambda request: httpx.Response(200, json={...}))
        client = OrderApiClient(settings, transport=transport)
        client.post_form([("key", "1")])
        assert len(transport.requests) == 1
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def sleeps() -> list[float]:
    """Collects the backoff delays a client would have slept."""
    return []


@pytest.fixture
def make_client(app_settings, sleeps) -> Callable[..., tuple[OrderApiClient, RecordingTransport]]:
    """
    Build an OrderApiClient served by a recording mock transport.

    Usage:
        client, transport = make_client(handler)
    """
    created: list[OrderApiClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = OrderApiClient(app_settings, transport=transport, sleep=sleeps.append)
        created.append(client)
        return client, transport

    yield factory

    for client in created:
        client.close()


def envelope_json(code: int = 1, error: str = "", data: list | None = None, count: int | None = None) -> dict:
    body: dict = {"code": code, "error": error}
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    return body


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Mock OrderApiClient for service tests."""
    return MagicMock(spec=OrderApiClient)


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.warning.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def envelope() -> Callable[..., dict]:
    """Provide envelope_json for building API response bodies."""
    return envelope_json
