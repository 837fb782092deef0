"""
Custom exceptions for relay_http.

This module defines the exception hierarchy used throughout
the library for error handling and debugging.
"""

from typing import Optional


class HTTPClientError(Exception):
    """Base exception for all relay_http errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidArgumentError(HTTPClientError, ValueError):
    """Raised when a verb, URL or event name is malformed or has the wrong type."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Invalid argument: {message}", cause)


class ClientNotBoundError(HTTPClientError, RuntimeError):
    """Raised when a request is sent without a client attached to it."""

    def __init__(self, message: str = "A client must be set on the request") -> None:
        super().__init__(message)


class ClientStateError(HTTPClientError, RuntimeError):
    """Raised when a message is mutated in a way its lifecycle forbids."""


class TransportError(HTTPClientError):
    """
    Raised when the transport backend reports a failure.

    Carries the numeric error code reported by the backend alongside
    the backend's own error message.
    """

    def __init__(self, code: int, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Transport error: [{code}] {message}", cause)
        self.code = code
        self.reason = message


class ProtocolError(HTTPClientError):
    """Raised when the raw response does not follow the HTTP wire format."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Protocol error: {message}", cause)


class ResponseFormatError(HTTPClientError, ValueError):
    """Raised when a response field or the response body has an invalid format."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Format error: {message}", cause)
