"""
Unit tests for the Message base class.

Tests header storage with case-insensitive lookups and body handling.
"""

from relay_http.message import Message


class TestHeaders:
    """Test header operations."""

    def test_add_and_get(self) -> None:
        message = Message()
        message.add_header("Content-Type", "application/json")
        assert message.get_header("Content-Type") == "application/json"
        assert message.get_header("content-type") == "application/json"
        assert message.get_header("CONTENT-TYPE") == "application/json"

    def test_missing_header(self) -> None:
        message = Message()
        assert message.get_header("X-Missing") is None
        assert message.get_header("X-Missing", "fallback") == "fallback"
        assert not message.has_header("X-Missing")

    def test_has_header_case_insensitive(self) -> None:
        message = Message({"Accept": "*/*"})
        assert message.has_header("accept")
        assert message.has_header("ACCEPT")

    def test_first_spelling_is_kept(self) -> None:
        message = Message()
        message.add_header("X-Token", "one")
        message.add_header("x-token", "two")
        assert message.get_headers() == {"X-Token": "two"}

    def test_values_are_strings(self) -> None:
        message = Message()
        message.add_header("Content-Length", 17)
        assert message.get_header("Content-Length") == "17"

    def test_add_headers(self) -> None:
        message = Message()
        message.add_headers({"Accept": "*/*", "Authorization": "Bearer token123"})
        assert message.get_headers() == {
            "Accept": "*/*",
            "Authorization": "Bearer token123",
        }

    def test_get_headers_returns_copy(self) -> None:
        message = Message({"Accept": "*/*"})
        headers = message.get_headers()
        headers["Accept"] = "text/plain"
        assert message.get_header("Accept") == "*/*"

    def test_header_lines(self) -> None:
        message = Message({"Accept": "*/*", "X-Trace": "abc"})
        assert message.get_header_lines() == ["Accept: */*", "X-Trace: abc"]

    def test_remove_header(self) -> None:
        message = Message({"Accept": "*/*", "X-Trace": "abc"})
        message.remove_header("x-trace")
        assert not message.has_header("X-Trace")
        assert message.has_header("Accept")

    def test_remove_missing_header(self) -> None:
        message = Message()
        message.remove_header("X-Missing")
        assert message.get_headers() == {}

    def test_remove_headers(self) -> None:
        message = Message({"Accept": "*/*", "X-Trace": "abc"})
        message.remove_headers()
        assert message.get_headers() == {}

    def test_chaining(self) -> None:
        message = Message().add_header("A", "1").add_header("B", "2").remove_header("A")
        assert message.get_headers() == {"B": "2"}


class TestBody:
    """Test body handling."""

    def test_no_body_by_default(self) -> None:
        message = Message()
        assert message.body is None
        assert not message.has_body()

    def test_set_body(self) -> None:
        message = Message().set_body('{"key": "value"}')
        assert message.body == '{"key": "value"}'
        assert message.has_body()

    def test_bytes_body(self) -> None:
        message = Message().set_body(b"\x00\x01")
        assert message.body == b"\x00\x01"
