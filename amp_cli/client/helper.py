"""
Request Helper.

Async HTTP helper for invoking named operations on the AMP status service.
All requests include X-Frontend-ID: cli header for log routing.

Transport, HTTP status and decoding failures are translated into the
application error classes so callers only ever handle ApplicationError.

Usage:
    async with new_helper(timeout=5.0) as helper:
        helper.set_base_url("http://localhost:32777")
        status = await helper.call(AMP_STATUS_SVC)
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from amp_cli.client.data import AmpStatus
from amp_cli.core.config import get_client_defaults
from amp_cli.core.config_schema import DEFAULT_STATUS_PATH
from amp_cli.core.exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DecodeFailedError,
    RequestTimeoutError,
    ServiceError,
)
from amp_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


@dataclass(frozen=True)
class ServiceOperation(Generic[ResultT]):
    """A named remote operation and the model its response decodes into."""

    name: str
    method: str
    path: str
    response_model: type[ResultT]


AMP_STATUS_SVC: ServiceOperation[AmpStatus] = ServiceOperation(
    name="amp-status",
    method="GET",
    path=DEFAULT_STATUS_PATH,
    response_model=AmpStatus,
)


class RequestHelper:
    """
    HTTP helper for AMP service operations.

    Features:
    - Base URL set explicitly, before the first call
    - Explicit request timeout
    - X-Frontend-ID header for log routing
    - Typed results: call() returns the operation's response model
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the helper.

        Args:
            timeout: Request timeout in seconds. If None, reads from config/settings/application.yaml.
            transport: Optional httpx transport, mainly for tests.
        """
        if timeout is None:
            _, timeout = get_client_defaults()
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")

        self.base_url: str | None = None
        self.timeout = float(timeout)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def set_base_url(self, base_url: str) -> "RequestHelper":
        """Set the service base URL. Returns the helper for chaining."""
        if not base_url or not base_url.strip():
            raise ConfigurationError("Base URL must not be empty")
        self.base_url = base_url.strip().rstrip("/")
        return self

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli", "Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "RequestHelper":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def call(self, operation: ServiceOperation[ResultT]) -> ResultT:
        """
        Invoke a remote operation.

        Args:
            operation: The operation to invoke, e.g. AMP_STATUS_SVC

        Returns:
            The decoded response model

        Raises:
            ConfigurationError: If no base URL has been set
            RequestTimeoutError: If the request times out
            ConnectionFailedError: If the service cannot be reached
            ServiceError: If the service answers with a non-2xx status
            DecodeFailedError: If the body does not match the response model
        """
        if self.base_url is None:
            raise ConfigurationError("Base URL not set; call set_base_url() first")

        url = f"{self.base_url}{operation.path}"
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            operation=operation.name,
            method=operation.method,
            url=url,
        )

        try:
            response = await client.request(operation.method, url)
        except httpx.TimeoutException as e:
            self._log_failure(operation, url, e)
            raise RequestTimeoutError(
                f"Request to {url} timed out after {self.timeout:g}s"
            ) from e
        except httpx.DecodingError as e:
            self._log_failure(operation, url, e)
            raise DecodeFailedError(f"{operation.name} response body could not be decoded: {e}") from e
        except (httpx.TransportError, httpx.InvalidURL) as e:
            self._log_failure(operation, url, e)
            raise ConnectionFailedError(f"Cannot connect to {url}: {e}") from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            operation=operation.name,
            url=url,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise ServiceError(
                f"{operation.name} returned HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeFailedError(f"{operation.name} response is not valid JSON") from e

        try:
            return operation.response_model.model_validate(payload)
        except ValidationError as e:
            raise DecodeFailedError(
                f"{operation.name} response does not match {operation.response_model.__name__}: "
                f"{e.error_count()} invalid field(s)"
            ) from e

    def _log_failure(self, operation: ServiceOperation[Any], url: str, error: Exception) -> None:
        log_with_source(
            logger,
            "cli",
            "error",
            "API request failed",
            operation=operation.name,
            url=url,
            error=str(error) or type(error).__name__,
        )


def new_helper(
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RequestHelper:
    """Create a request helper. Set its base URL before calling."""
    return RequestHelper(timeout=timeout, transport=transport)
