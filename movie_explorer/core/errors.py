"""
Failures raised by the fetch executor.

The state machine catches FetchError as a whole and shows one generic
message; the subclasses exist so the distinction reaches the logs.
"""


class FetchError(Exception):
    """Base class for a catalog fetch that produced no usable page."""


class NetworkError(FetchError):
    """No response was received (connection refused, DNS, timeout)."""


class HttpError(FetchError):
    """The catalog answered with a non-2xx status."""

    def __init__(self, status: int, message: str = ""):
        self.status = status
        super().__init__(message or f"HTTP error! status: {status}")


class ParseError(FetchError):
    """The response body was not a well-formed catalog envelope."""
