"""
relay_http - Small synchronous HTTP client

Builds typed requests for each HTTP verb, executes them through a
transport handle and parses the raw transport output into responses,
with hooks on the request, error and response steps.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .client import Client, Event, USER_AGENT
from .message import Message
from .request import (
    Request,
    GetRequest,
    PostRequest,
    HeadRequest,
    PutRequest,
    DeleteRequest,
)
from .response import Response
from .factories import RequestFactory, ResponseFactory, parse_headers
from .handle import TransportHandle
from .options import TransportOption, Verb
from .exceptions import (
    HTTPClientError,
    InvalidArgumentError,
    ClientNotBoundError,
    ClientStateError,
    TransportError,
    ProtocolError,
    ResponseFormatError,
)

__all__ = [
    "Client",
    "Event",
    "USER_AGENT",
    "Message",
    "Request",
    "GetRequest",
    "PostRequest",
    "HeadRequest",
    "PutRequest",
    "DeleteRequest",
    "Response",
    "RequestFactory",
    "ResponseFactory",
    "parse_headers",
    "TransportHandle",
    "TransportOption",
    "Verb",
    "HTTPClientError",
    "InvalidArgumentError",
    "ClientNotBoundError",
    "ClientStateError",
    "TransportError",
    "ProtocolError",
    "ResponseFormatError",
]
