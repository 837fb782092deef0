"""
Request and response factories for relay_http.

``RequestFactory`` turns a verb and a URL into the matching request
variant. ``ResponseFactory`` turns the raw bytes returned by a
transport handle into a Response, using ``parse_headers`` to read the
status line and headers.
"""

import re
from typing import TYPE_CHECKING, Mapping, Optional, Union

from .exceptions import InvalidArgumentError, ProtocolError
from .options import Verb, coerce_verb
from .request import REQUEST_TYPES, Request
from .response import Response
from .transport.utils import is_absolute_url, parse_header_lines

if TYPE_CHECKING:
    from .handle import TransportHandle

HEADER_TERMINATOR = b"\r\n\r\n"

_STATUS_LINE = re.compile(r"^HTTP/(\d+(?:\.\d+)?)\s+(\d{3})(?:\s+(.*))?$")


class RequestFactory:
    """Builds request objects from a verb name and a URL."""

    def build(
        self,
        verb: Union[str, Verb],
        url: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        """
        Build the request variant matching ``verb``.

        Args:
            verb: HTTP verb, as a Verb member or a case-insensitive name
            url: Absolute URL of the request
            headers: Optional headers to attach

        Returns:
            New request instance

        Raises:
            InvalidArgumentError: If the verb is unknown or the URL is not
                                  a non-empty absolute URL string
        """
        request_type = REQUEST_TYPES[coerce_verb(verb)]

        if not isinstance(url, str) or not url:
            raise InvalidArgumentError("url must be a non-empty string")
        if not is_absolute_url(url):
            raise InvalidArgumentError(f"{url!r} is not a valid absolute URL")

        return request_type(url, headers)


def _parse_status(line: str) -> int:
    match = _STATUS_LINE.match(line.strip())
    if match is None:
        raise ProtocolError(f"invalid status line {line!r}")
    return int(match.group(2))


def parse_headers(raw: Union[bytes, str], response: Response) -> Union[bytes, str]:
    """
    Read the status line and headers of a raw response.

    The raw stream may hold informational (1xx) header blocks before the
    final one; those are skipped. The status and headers of the final
    block are written on ``response``.

    Args:
        raw: Raw bytes returned by the transport
        response: Response to populate

    Returns:
        Whatever followed the final header block, i.e. the body. It has
        the same type as ``raw``.

    Raises:
        ProtocolError: If a status line is missing or malformed
    """
    is_text = isinstance(raw, str)
    header_codec = "utf-8" if is_text else "iso-8859-1"
    data = raw.encode("utf-8") if is_text else bytes(raw)

    while True:
        head, sep, rest = data.partition(HEADER_TERMINATOR)
        lines = head.decode(header_codec).splitlines()
        if not lines:
            raise ProtocolError("missing status line")

        status = _parse_status(lines[0])
        if 100 <= status < 200 and sep and rest.startswith(b"HTTP/"):
            data = rest
            continue
        break

    response.status = status
    for name, value in parse_header_lines(lines[1:]):
        response.add_header(name, value)

    return rest.decode("utf-8") if is_text else rest


class ResponseFactory:
    """Builds Response objects from raw transport output."""

    @staticmethod
    def build(raw: bytes, handle: "TransportHandle", request: Request) -> Response:
        """
        Create the response for a completed transfer.

        Args:
            raw: Raw bytes returned by ``handle.execute()``
            handle: The handle that performed the transfer
            request: The request that was sent

        Returns:
            The populated response

        Raises:
            ProtocolError: If the raw bytes are not a valid HTTP response
        """
        response = Response()
        response.request = request
        body = parse_headers(raw, response)
        response.set_body(body)
        response.transaction_time = handle.get_info("total_time") or 0.0
        return response
