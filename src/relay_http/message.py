"""
Base message type shared by requests and responses.

Header names are matched case-insensitively. The spelling used by the
first write of a header is the one reported back by ``get_headers``
and ``get_header_lines``.
"""

from typing import Dict, List, Mapping, Optional, Tuple, Union

from typing_extensions import Self

Body = Union[str, bytes]


class Message:
    """
    HTTP message with headers and an optional body.
    """

    def __init__(self, headers: Optional[Mapping[str, str]] = None) -> None:
        # lowercased name -> (canonical name, value)
        self._headers: Dict[str, Tuple[str, str]] = {}
        self._body: Optional[Body] = None
        if headers:
            self.add_headers(headers)

    def add_header(self, name: str, value: str) -> Self:
        """
        Add a header to the message.

        If a header with the same name (ignoring case) already exists,
        its value is replaced but its original spelling is kept.

        Args:
            name: Header name
            value: Header value

        Returns:
            The message itself
        """
        key = name.lower()
        canonical = self._headers[key][0] if key in self._headers else name
        self._headers[key] = (canonical, str(value))
        return self

    def add_headers(self, headers: Mapping[str, str]) -> Self:
        """Add multiple headers at once."""
        for name, value in headers.items():
            self.add_header(name, value)
        return self

    def has_header(self, name: str) -> bool:
        """Check if a header exists (case-insensitive)."""
        return name.lower() in self._headers

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a header value by name (case-insensitive)."""
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else default

    def get_headers(self) -> Dict[str, str]:
        """Get a copy of all headers, keyed by their canonical names."""
        return {name: value for name, value in self._headers.values()}

    def get_header_lines(self) -> List[str]:
        """Get all headers formatted as ``Name: value`` lines."""
        return [f"{name}: {value}" for name, value in self._headers.values()]

    def remove_header(self, name: str) -> Self:
        """Remove a header by name. Missing headers are ignored."""
        self._headers.pop(name.lower(), None)
        return self

    def remove_headers(self) -> Self:
        """Remove all headers at once."""
        self._headers.clear()
        return self

    @property
    def body(self) -> Optional[Body]:
        """The message body, or None when no body was set."""
        return self._body

    def set_body(self, body: Optional[Body]) -> Self:
        """Set the message body."""
        self._body = body
        return self

    def has_body(self) -> bool:
        return self._body is not None
