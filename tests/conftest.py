"""
Pytest configuration for relay_http tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import socket
import threading
from typing import List

import pytest

from relay_http import Client
from relay_http.transport.mock import MockTransportBackend


BASE_URL = "http://example.com"


class LocalHTTPServer:
    """
    Minimal threaded HTTP server for testing the socket backend.

    Every connection receives the same canned reply and is then closed.
    The raw bytes of every request received are kept in ``requests``.
    """

    def __init__(self, reply: bytes) -> None:
        self.reply = reply
        self.requests: List[bytes] = []
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(5)
        self._sock.settimeout(0.1)
        self._running = True
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def port(self) -> int:
        return self._sock.getsockname()[1]

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}"

    def close(self) -> None:
        self._running = False
        self._thread.join(timeout=2)
        self._sock.close()

    def _serve(self) -> None:
        while self._running:
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            with conn:
                conn.settimeout(5)
                self.requests.append(self._read_request(conn))
                conn.sendall(self.reply)

    @staticmethod
    def _read_request(conn: socket.socket) -> bytes:
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = conn.recv(4096)
            if not chunk:
                return data
            data += chunk

        head, _, body = data.partition(b"\r\n\r\n")
        length = 0
        for line in head.split(b"\r\n")[1:]:
            name, _, value = line.partition(b":")
            if name.strip().lower() == b"content-length":
                length = int(value.strip())

        while len(body) < length:
            chunk = conn.recv(4096)
            if not chunk:
                break
            body += chunk

        return head + b"\r\n\r\n" + body


@pytest.fixture
def ok_response():
    """Raw bytes of a simple 200 response."""
    return (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/html; charset=UTF-8\r\n"
        b"Content-Length: 17\r\n"
        b"\r\n"
        b"Just some content"
    )


@pytest.fixture
def continue_response(ok_response):
    """Raw bytes of a 100 Continue block followed by a 200 response."""
    return b"HTTP/1.1 100 Continue\r\n\r\n" + ok_response


@pytest.fixture
def mock_backend():
    """Create a mock transport backend."""
    return MockTransportBackend()


@pytest.fixture
def client(mock_backend):
    """Create a client whose handles all share the mock backend."""
    return Client(BASE_URL, transport_factory=lambda: mock_backend)


@pytest.fixture
def local_server(ok_response):
    """Start a local HTTP server replying with ``ok_response``."""
    server = LocalHTTPServer(ok_response)
    yield server
    server.close()


@pytest.fixture
def make_server():
    """Start local HTTP servers with custom replies, closed after the test."""
    servers = []

    def _make_server(reply: bytes) -> LocalHTTPServer:
        server = LocalHTTPServer(reply)
        servers.append(server)
        return server

    yield _make_server

    for server in servers:
        server.close()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
