"""
Socket based transport backend for relay_http.

This module implements a blocking backend that performs one HTTP/1.1
exchange per execution: the request is framed with h11, written to a
fresh TCP (or TLS) connection, and everything the server sends until
it closes the connection is fed back into h11. The result is the
status and header blocks followed by the de-framed body.
"""

import logging
import socket
import ssl
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlparse

import h11

from ..options import TransportOption
from .backend import TransportBackend, TransportErrorCode, TransportResult
from .utils import DEFAULT_PORTS, format_host_header, parse_header_lines, parse_url

logger = logging.getLogger(__name__)

# Header managed by the backend itself
_RESERVED_HEADERS = {"connection"}

HEAD_TERMINATOR = b"\r\n\r\n"


class SocketTransportBackend(TransportBackend):
    """
    Blocking socket transport.

    Each execution opens a new connection and asks the server to close
    it once the response has been sent (``Connection: close``). The
    reply is read until end of stream and decoded by the same h11
    connection that framed the request, so chunked bodies come back
    decoded. A reply h11 rejects is reported as WEIRD_SERVER_REPLY.
    """

    # Default configuration
    DEFAULT_TIMEOUT = 30.0  # 30 seconds
    DEFAULT_READ_SIZE = 65536  # 64KB chunks

    def __init__(
        self,
        timeout: Optional[float] = None,
        read_size: Optional[int] = None,
    ) -> None:
        """
        Initialize the backend.

        Args:
            timeout: Socket timeout in seconds, used when the options
                     do not carry ``TransportOption.TIMEOUT``
            read_size: Maximum number of bytes read per recv call
        """
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._read_size = read_size or self.DEFAULT_READ_SIZE
        self._info: Dict[str, Any] = {}

    def execute(self, options: Mapping[TransportOption, Any]) -> TransportResult:
        url = options.get(TransportOption.URL)
        self._info = {"effective_url": url}

        start_time = time.monotonic()
        try:
            result = self._perform(url, options)
        finally:
            self._info["total_time"] = time.monotonic() - start_time

        if result.failed:
            logger.debug(f"Exchange with {url} failed: [{result.error_code}] {result.error_message}")
        else:
            logger.debug(
                f"Exchange with {url} returned {len(result.data)} bytes "
                f"({self._info['total_time']:.3f}s)"
            )
        return result

    def get_info(self, name: str) -> Optional[Any]:
        return self._info.get(name)

    def _perform(self, url: Any, options: Mapping[TransportOption, Any]) -> TransportResult:
        if not isinstance(url, str) or not url:
            return TransportResult(None, TransportErrorCode.URL_MALFORMAT, "No URL set")

        scheme = urlparse(url).scheme.lower()
        if scheme not in DEFAULT_PORTS:
            return TransportResult(
                None,
                TransportErrorCode.UNSUPPORTED_PROTOCOL,
                f"Protocol {scheme!r} not supported",
            )

        try:
            scheme, host, port, target = parse_url(url)
        except ValueError as e:
            return TransportResult(None, TransportErrorCode.URL_MALFORMAT, str(e))

        try:
            connection, payload = self._build_request(options, scheme, host, port, target)
        except (h11.LocalProtocolError, UnicodeEncodeError) as e:
            return TransportResult(
                None,
                TransportErrorCode.BAD_FUNCTION_ARGUMENT,
                f"Invalid request: {e}",
            )

        timeout = options.get(TransportOption.TIMEOUT) or self._timeout

        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except socket.gaierror as e:
            return TransportResult(
                None, TransportErrorCode.COULDNT_RESOLVE_HOST, f"Could not resolve host: {host} ({e})"
            )
        except socket.timeout:
            return TransportResult(
                None, TransportErrorCode.OPERATION_TIMEDOUT, f"Connection to {host}:{port} timed out"
            )
        except OSError as e:
            return TransportResult(
                None, TransportErrorCode.COULDNT_CONNECT, f"Failed to connect to {host}:{port}: {e}"
            )

        if scheme == "https":
            try:
                sock = ssl.create_default_context().wrap_socket(sock, server_hostname=host)
            except (ssl.SSLError, OSError) as e:
                sock.close()
                return TransportResult(None, TransportErrorCode.SSL_CONNECT_ERROR, str(e))

        with sock:
            try:
                sock.sendall(payload)
            except socket.timeout:
                return TransportResult(None, TransportErrorCode.OPERATION_TIMEDOUT, "Timed out while sending")
            except OSError as e:
                return TransportResult(None, TransportErrorCode.SEND_ERROR, f"Failed sending data: {e}")

            chunks: List[bytes] = []
            try:
                while True:
                    chunk = sock.recv(self._read_size)
                    if not chunk:
                        break
                    chunks.append(chunk)
            except socket.timeout:
                return TransportResult(None, TransportErrorCode.OPERATION_TIMEDOUT, "Timed out while receiving")
            except OSError as e:
                return TransportResult(None, TransportErrorCode.RECV_ERROR, f"Failure when receiving data: {e}")

        data = b"".join(chunks)
        if not data:
            return TransportResult(None, TransportErrorCode.GOT_NOTHING, "Empty reply from server")

        try:
            return TransportResult(self._decode_response(connection, data))
        except h11.RemoteProtocolError as e:
            return TransportResult(None, TransportErrorCode.WEIRD_SERVER_REPLY, f"Invalid server reply: {e}")

    def _build_request(
        self,
        options: Mapping[TransportOption, Any],
        scheme: str,
        host: str,
        port: int,
        target: str,
    ) -> Tuple[h11.Connection, bytes]:
        """
        Serialize the request described by the options using h11.

        Returns:
            The h11 connection, left waiting for the response, and the
            bytes to write on the connection
        """
        method = self._resolve_method(options)
        body = self._resolve_body(options, method)

        headers: List[Tuple[str, str]] = []
        names = set()
        for name, value in parse_header_lines(options.get(TransportOption.HTTPHEADER) or []):
            if name.lower() in _RESERVED_HEADERS:
                continue
            headers.append((name, value))
            names.add(name.lower())

        if "host" not in names:
            headers.insert(0, ("Host", format_host_header(host, port, scheme)))
        user_agent = options.get(TransportOption.USERAGENT)
        if user_agent and "user-agent" not in names:
            headers.append(("User-Agent", user_agent))
        if body is not None and not names & {"content-length", "transfer-encoding"}:
            headers.append(("Content-Length", str(len(body))))
        headers.append(("Connection", "close"))

        connection = h11.Connection(h11.CLIENT)
        data = connection.send(h11.Request(method=method, target=target, headers=headers))
        if body:
            data += connection.send(h11.Data(data=body))
        data += connection.send(h11.EndOfMessage())
        return connection, data

    def _decode_response(self, connection: h11.Connection, data: bytes) -> bytes:
        """
        Run the received bytes through h11.

        Returns:
            Every status/header block received (informational ones
            included) followed by the de-framed body

        Raises:
            h11.RemoteProtocolError: If the reply is not valid HTTP/1.1
        """
        connection.receive_data(data)
        connection.receive_data(b"")

        blocks: List[bytes] = []
        body: List[bytes] = []
        while True:
            event = connection.next_event()
            if isinstance(event, (h11.InformationalResponse, h11.Response)):
                blocks.append(self._format_head(event))
            elif isinstance(event, h11.Data):
                body.append(bytes(event.data))
            else:
                # end of message, or nothing more to read
                break

        return b"".join(blocks) + b"".join(body)

    @staticmethod
    def _format_head(event: Any) -> bytes:
        lines = [b"HTTP/" + event.http_version + b" " + str(event.status_code).encode("ascii") + b" " + event.reason]
        for name, value in event.headers.raw_items():
            lines.append(name + b": " + value)
        return b"\r\n".join(lines) + HEAD_TERMINATOR

    def _resolve_method(self, options: Mapping[TransportOption, Any]) -> str:
        custom = options.get(TransportOption.CUSTOMREQUEST)
        if custom:
            return str(custom).upper()
        if options.get(TransportOption.NOBODY):
            return "HEAD"
        if options.get(TransportOption.POST):
            return "POST"
        return "GET"

    def _resolve_body(self, options: Mapping[TransportOption, Any], method: str) -> Optional[bytes]:
        if method in ("GET", "HEAD"):
            return None

        fields = options.get(TransportOption.POSTFIELDS, False)
        if fields is False or fields is None:
            # POST always carries a (possibly empty) body
            return b"" if method == "POST" else None
        if isinstance(fields, str):
            return fields.encode("utf-8")
        return bytes(fields)
