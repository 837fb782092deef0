"""
Transport backend components for relay_http.

This module provides the backends that perform the actual HTTP
exchange on behalf of transport handles.
"""

from .backend import TransportBackend, TransportErrorCode, TransportResult
from .tcp import SocketTransportBackend
from .mock import MockTransportBackend
from .utils import (
    DEFAULT_PORTS,
    is_absolute_url,
    parse_url,
    format_host_header,
    parse_header_lines,
)

__all__ = [
    "TransportBackend",
    "TransportErrorCode",
    "TransportResult",
    "SocketTransportBackend",
    "MockTransportBackend",
    "DEFAULT_PORTS",
    "is_absolute_url",
    "parse_url",
    "format_host_header",
    "parse_header_lines",
]
