"""
Unit Test Fixtures.

Fixtures for unit tests - all network access is stubbed.
Unit tests should be fast and isolated, never touching a real service.
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest


# =============================================================================
# HTTP Transport Fixtures
# =============================================================================


@pytest.fixture
def status_payload() -> dict[str, Any]:
    """A well-formed status response body."""
    return {"name": "svc", "id": 42, "status": "OK"}


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by transports built with make_transport."""
    return []


@pytest.fixture
def make_transport(
    recorded_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """
    Factory for httpx mock transports.

    Usage:
        transport = make_transport(json={"name": "svc", "id": 1, "status": "OK"})
        transport = make_transport(status_code=500)
        transport = make_transport(error=httpx.ConnectError("Connection refused"))
    """

    def _make(
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler)

    return _make
