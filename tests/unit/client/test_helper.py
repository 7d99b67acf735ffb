"""Unit tests for the request helper."""

import httpx
import pytest

from amp_cli.client import AMP_STATUS_SVC, AmpStatus, RequestHelper, new_helper
from amp_cli.core.exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DecodeFailedError,
    RequestTimeoutError,
    ServiceError,
)


class TestRequestHelperSetup:
    """Tests for helper construction and base URL handling."""

    def test_factory_returns_helper(self) -> None:
        helper = new_helper(timeout=3.0)
        assert isinstance(helper, RequestHelper)
        assert helper.timeout == 3.0
        assert helper.base_url is None

    def test_timeout_defaults_from_config(self) -> None:
        assert new_helper().timeout == 10.0

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Timeout must be positive"):
            new_helper(timeout=0)

    def test_set_base_url_chains(self) -> None:
        helper = new_helper()
        assert helper.set_base_url("http://example.com:9000") is helper
        assert helper.base_url == "http://example.com:9000"

    def test_set_base_url_strips_trailing_slash(self) -> None:
        helper = new_helper().set_base_url("http://example.com:9000/")
        assert helper.base_url == "http://example.com:9000"

    def test_empty_base_url_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            new_helper().set_base_url("  ")

    @pytest.mark.asyncio
    async def test_call_without_base_url(self) -> None:
        helper = new_helper()
        with pytest.raises(ConfigurationError, match="set_base_url"):
            await helper.call(AMP_STATUS_SVC)


class TestRequestHelperCall:
    """Tests for RequestHelper.call."""

    @pytest.mark.asyncio
    async def test_returns_typed_result(self, make_transport, status_payload, recorded_requests) -> None:
        async with new_helper(transport=make_transport(json=status_payload)) as helper:
            helper.set_base_url("http://localhost:32777")
            result = await helper.call(AMP_STATUS_SVC)

        assert result == AmpStatus(name="svc", id=42, status="OK")
        assert len(recorded_requests) == 1
        request = recorded_requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://localhost:32777/api/v1/status"

    @pytest.mark.asyncio
    async def test_sends_frontend_header(self, make_transport, status_payload, recorded_requests) -> None:
        async with new_helper(transport=make_transport(json=status_payload)) as helper:
            await helper.set_base_url("http://test:8000").call(AMP_STATUS_SVC)

        assert recorded_requests[0].headers["X-Frontend-ID"] == "cli"
        assert recorded_requests[0].headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_server_error_maps_to_service_error(self, make_transport) -> None:
        async with new_helper(transport=make_transport(status_code=503, json={"error": "down"})) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(ServiceError) as exc_info:
                await helper.call(AMP_STATUS_SVC)

        assert exc_info.value.status_code == 503
        assert "HTTP 503" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_not_found_maps_to_service_error(self, make_transport) -> None:
        async with new_helper(transport=make_transport(status_code=404)) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(ServiceError) as exc_info:
                await helper.call(AMP_STATUS_SVC)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_connection_refused(self, make_transport) -> None:
        transport = make_transport(error=httpx.ConnectError("Connection refused"))
        async with new_helper(transport=transport) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(ConnectionFailedError, match="Cannot connect to http://test:8000"):
                await helper.call(AMP_STATUS_SVC)

    @pytest.mark.asyncio
    async def test_timeout(self, make_transport) -> None:
        transport = make_transport(error=httpx.ReadTimeout("timed out"))
        async with new_helper(timeout=0.5, transport=transport) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(RequestTimeoutError, match="timed out after 0.5s"):
                await helper.call(AMP_STATUS_SVC)

    @pytest.mark.asyncio
    async def test_url_without_scheme(self) -> None:
        async with new_helper() as helper:
            helper.set_base_url("localhost:32777")
            with pytest.raises(ConnectionFailedError):
                await helper.call(AMP_STATUS_SVC)

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_transport) -> None:
        async with new_helper(transport=make_transport(content=b"<html>")) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(DecodeFailedError, match="not valid JSON"):
                await helper.call(AMP_STATUS_SVC)

    @pytest.mark.asyncio
    async def test_payload_missing_fields(self, make_transport) -> None:
        async with new_helper(transport=make_transport(json={"name": "svc"})) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(DecodeFailedError, match="AmpStatus"):
                await helper.call(AMP_STATUS_SVC)


    @pytest.mark.asyncio
    async def test_boolean_id(self, make_transport) -> None:
        payload = {"name": "svc", "id": True, "status": "OK"}
        async with new_helper(transport=make_transport(json=payload)) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(DecodeFailedError):
                await helper.call(AMP_STATUS_SVC)

    @pytest.mark.asyncio
    async def test_corrupt_content_encoding(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, headers={"Content-Encoding": "gzip"}, content=b"not gzip"
            )
        )
        async with new_helper(transport=transport) as helper:
            helper.set_base_url("http://test:8000")
            with pytest.raises(DecodeFailedError, match="could not be decoded"):
                await helper.call(AMP_STATUS_SVC)

class TestRequestHelperLifecycle:
    """Tests for client creation and closing."""

    @pytest.mark.asyncio
    async def test_close_client(self) -> None:
        helper = new_helper()
        await helper._get_client()
        assert helper._client is not None

        await helper.close()
        assert helper._client is None

    @pytest.mark.asyncio
    async def test_close_without_client(self) -> None:
        helper = new_helper()
        await helper.close()
        assert helper._client is None

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, make_transport, status_payload) -> None:
        helper = new_helper(transport=make_transport(json=status_payload))
        async with helper:
            await helper.set_base_url("http://test:8000").call(AMP_STATUS_SVC)
            assert helper._client is not None

        assert helper._client is None
