"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class FetchError(AppError):
    """Base for every failure raised while fetching remote holdings."""

    def __init__(self, message: str, code: str, cause: Optional[BaseException] = None):
        super().__init__(message, code=code)
        self.cause = cause


class InvalidEndpointError(FetchError):
    """Raised when the configured endpoint is not a usable URL."""

    def __init__(self, endpoint: str = ""):
        super().__init__("Invalid URL", code="INVALID_ENDPOINT")
        self.endpoint = endpoint


class NoResponseBodyError(FetchError):
    """Raised when the server answered without a payload."""

    def __init__(self):
        super().__init__("No data received from server", code="NO_RESPONSE_BODY")


class ServerStatusError(FetchError):
    """Raised when the server answers with a status outside 200-299."""

    def __init__(self, status_code: int):
        super().__init__(
            f"Server error with status code: {status_code}",
            code="SERVER_STATUS",
        )
        self.status_code = status_code


class DecodeFailureError(FetchError):
    """Raised when the payload does not match the holdings envelope."""

    def __init__(self, cause: BaseException):
        super().__init__(
            f"Failed to decode response: {cause}",
            code="DECODE_FAILURE",
            cause=cause,
        )


class TransportError(FetchError):
    """Raised on connection-level failures (DNS, refused, timeout)."""

    def __init__(self, cause: BaseException):
        super().__init__(
            f"Network error: {cause}",
            code="TRANSPORT",
            cause=cause,
        )
