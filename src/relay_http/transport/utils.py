"""
Transport utilities for relay_http.

This module provides helper functions for URL handling and header
formatting shared by the request factory and the transport backends.
"""

from typing import Iterable, List, Tuple
from urllib.parse import urlparse

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}


def is_absolute_url(url: str) -> bool:
    """
    Check whether a string is a well-formed absolute URL.

    Args:
        url: URL string to check

    Returns:
        True if the URL has both a scheme and a host
    """
    if not isinstance(url, str) or not url:
        return False
    try:
        parsed = urlparse(url)
        # Accessing the port validates it
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.hostname)


def parse_url(url: str) -> Tuple[str, str, int, str]:
    """
    Parse URL into components.

    Args:
        url: URL string to parse

    Returns:
        Tuple of (scheme, host, port, target) where target is the path
        plus the query string

    Raises:
        ValueError: If URL is malformed or its scheme has no known port
    """
    parsed = urlparse(url)

    scheme = parsed.scheme.lower()
    if not scheme:
        raise ValueError("No scheme found in URL")

    host = parsed.hostname or ""
    if not host:
        raise ValueError("No hostname found in URL")

    port = parsed.port
    if port is None:
        if scheme not in DEFAULT_PORTS:
            raise ValueError(f"No default port for scheme {scheme!r}")
        port = DEFAULT_PORTS[scheme]

    target = parsed.path or "/"
    if parsed.query:
        target += "?" + parsed.query

    return scheme, host, port, target


def format_host_header(host: str, port: int, scheme: str) -> str:
    """
    Format host header for HTTP requests.

    Args:
        host: Hostname
        port: Port number
        scheme: URL scheme

    Returns:
        Formatted host header string
    """
    if ":" in host:
        host = f"[{host}]"
    if DEFAULT_PORTS.get(scheme) == port:
        return host
    return f"{host}:{port}"


def parse_header_lines(lines: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Split ``Name: value`` lines into (name, value) pairs.

    Lines without a colon are skipped.
    """
    headers = []
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        headers.append((name.strip(), value.strip()))
    return headers
