"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure of a status call surfaces as one of these, so commands can
report it and exit non-zero without inspecting transport details.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when the client or CLI is misconfigured."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class ConnectionFailedError(ApplicationError):
    """Raised when the status service cannot be reached."""

    def __init__(self, message: str = "Connection failed", code: str = "NET_CONNECTION_FAILED") -> None:
        super().__init__(message, code=code)


class RequestTimeoutError(ConnectionFailedError):
    """Raised when a request to the status service times out."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message, code="NET_TIMEOUT")


class ServiceError(ApplicationError):
    """Raised when the status service answers with a non-success status."""

    def __init__(self, message: str = "Service error", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="SVC_ERROR_RESPONSE")


class DecodeFailedError(ApplicationError):
    """Raised when a response body does not match the expected model."""

    def __init__(self, message: str = "Could not decode response") -> None:
        super().__init__(message, code="SVC_DECODE_FAILED")
