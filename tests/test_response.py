"""
Unit tests for the Response class.
"""

import pytest

from relay_http.exceptions import ClientStateError, ResponseFormatError
from relay_http.request import GetRequest
from relay_http.response import Response


class TestResponse:
    """Test Response setters and accessors."""

    @pytest.fixture
    def response(self):
        return Response()

    def test_defaults(self, response) -> None:
        assert response.status is None
        assert response.transaction_time == 0.0
        assert response.request is None
        assert response.body is None

    def test_setters(self, response) -> None:
        request = GetRequest("http://www.example.com")
        response.request = request
        assert response.request is request

        response.status = 200
        assert response.status == 200

        response.transaction_time = 1.5
        assert response.transaction_time == 1.5

    def test_zero_transaction_time(self, response) -> None:
        response.transaction_time = 0
        assert response.transaction_time == 0.0

    @pytest.mark.parametrize("value", ["hello_world", -0.8, None, True])
    def test_transaction_time_format_check(self, response, value) -> None:
        with pytest.raises(ResponseFormatError):
            response.transaction_time = value

    def test_request_is_set_once(self, response) -> None:
        response.request = GetRequest("http://www.example.com")
        with pytest.raises(ClientStateError):
            response.request = GetRequest("http://www.example.org")

    def test_repr(self, response) -> None:
        response.status = 404
        assert repr(response) == "<Response [404]>"


class TestJson:
    """Test JSON decoding of the body."""

    def test_valid_json(self) -> None:
        response = Response().set_body('{"key":"value"}')
        assert response.json() == {"key": "value"}

    def test_bytes_body(self) -> None:
        response = Response().set_body(b'[1, 2, 3]')
        assert response.json() == [1, 2, 3]

    def test_invalid_json(self) -> None:
        response = Response().set_body("{invalidJson}")
        with pytest.raises(ResponseFormatError) as exc_info:
            response.json()
        assert isinstance(exc_info.value.cause, ValueError)

    def test_empty_body(self) -> None:
        with pytest.raises(ResponseFormatError):
            Response().json()
