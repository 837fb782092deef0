"""
Unit tests for custom exceptions.

Tests the exception hierarchy to ensure proper error handling
and cause tracking.
"""

import pytest

from relay_http.exceptions import (
    HTTPClientError,
    InvalidArgumentError,
    ClientNotBoundError,
    ClientStateError,
    TransportError,
    ProtocolError,
    ResponseFormatError,
)


class TestHTTPClientError:
    """Test base HTTPClientError class."""

    def test_basic_creation(self) -> None:
        """Test creating basic HTTPClientError."""
        error = HTTPClientError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.cause is None

    def test_with_cause(self) -> None:
        """Test creating HTTPClientError with cause."""
        original_error = ValueError("Original error")
        error = HTTPClientError("Test error message", cause=original_error)
        assert error.cause == original_error


class TestTransportError:
    """Test TransportError class."""

    def test_carries_code_and_reason(self) -> None:
        error = TransportError(7, "Failed to connect")
        assert error.code == 7
        assert error.reason == "Failed to connect"
        assert str(error) == "Transport error: [7] Failed to connect"


class TestCategoryMessages:
    """Test the prefixes of the category exceptions."""

    def test_invalid_argument(self) -> None:
        error = InvalidArgumentError("url must be a string")
        assert error.message == "Invalid argument: url must be a string"

    def test_protocol(self) -> None:
        error = ProtocolError("invalid status line 'foo'")
        assert "Protocol error: invalid status line" in str(error)

    def test_format(self) -> None:
        error = ResponseFormatError("bad time")
        assert error.message == "Format error: bad time"

    def test_client_not_bound_default_message(self) -> None:
        assert str(ClientNotBoundError()) == "A client must be set on the request"


class TestExceptionHierarchy:
    """Test exception hierarchy and inheritance."""

    def test_inheritance(self) -> None:
        """Test that all exceptions inherit from HTTPClientError."""
        for error_type in (
            InvalidArgumentError,
            ClientNotBoundError,
            ClientStateError,
            TransportError,
            ProtocolError,
            ResponseFormatError,
        ):
            assert issubclass(error_type, HTTPClientError)

    def test_builtin_bases(self) -> None:
        """Test that errors can be caught by their builtin categories."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(ResponseFormatError, ValueError)
        assert issubclass(ClientNotBoundError, RuntimeError)
        assert issubclass(ClientStateError, RuntimeError)

    def test_exception_raising(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            raise InvalidArgumentError("bad verb")

        assert "Invalid argument: bad verb" in str(exc_info.value)
