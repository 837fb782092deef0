"""
HTTP client for relay_http.

The Client builds requests for a base URL, sends them through one
transport handle per verb, and notifies registered handlers at the
main steps of each exchange.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from . import __version__
from .exceptions import InvalidArgumentError, TransportError
from .factories import RequestFactory, ResponseFactory
from .handle import TransportHandle
from .options import TransportOption, Verb
from .request import Request
from .response import Response
from .transport.backend import TransportBackend
from .transport.tcp import SocketTransportBackend
from .transport.utils import is_absolute_url

logger = logging.getLogger(__name__)

USER_AGENT = f"relay_http/{__version__}"

Handler = Callable[[Any], Any]


class Event(str, Enum):
    """Lifecycle events a handler can be registered for."""
    REQUEST_BUILT = "request.built"    # handler receives the Request
    ERROR = "request.error"            # handler receives the TransportError
    RESPONSE_BUILT = "response.built"  # handler receives the Response


class Client:
    """
    Synchronous HTTP client.

    Each verb gets its own TransportHandle the first time a request of
    that verb is sent, and the handle is reused for every later request
    of the same verb. Handle options accumulate across those sends, so
    an option set for one GET stays in effect for the next GET on the
    same client unless it is overwritten.

    A client is not safe for concurrent use from several threads.
    """

    def __init__(
        self,
        base_url: str = "",
        transport_factory: Callable[[], TransportBackend] = SocketTransportBackend,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Prefix prepended to every request URL
            transport_factory: Callable creating the backend session of
                               each new transport handle

        Raises:
            InvalidArgumentError: If base_url is not a string or is not an
                                  absolute URL
        """
        if not isinstance(base_url, str):
            raise InvalidArgumentError("base_url must be a string")
        if base_url and not is_absolute_url(base_url):
            raise InvalidArgumentError(f"{base_url!r} is not a valid absolute URL")

        self._base_url = base_url
        self._request_factory = RequestFactory()
        self._transport_factory = transport_factory
        self._handles: Dict[Verb, TransportHandle] = {}
        self._events: Dict[Event, List[Handler]] = {event: [] for event in Event}

    @property
    def base_url(self) -> str:
        return self._base_url

    def get(self, url: str = "", headers: Optional[Mapping[str, str]] = None) -> Request:
        return self.create_request(Verb.GET, url, headers)

    def post(self, url: str = "", headers: Optional[Mapping[str, str]] = None) -> Request:
        return self.create_request(Verb.POST, url, headers)

    def head(self, url: str = "", headers: Optional[Mapping[str, str]] = None) -> Request:
        return self.create_request(Verb.HEAD, url, headers)

    def put(self, url: str = "", headers: Optional[Mapping[str, str]] = None) -> Request:
        return self.create_request(Verb.PUT, url, headers)

    def delete(self, url: str = "", headers: Optional[Mapping[str, str]] = None) -> Request:
        return self.create_request(Verb.DELETE, url, headers)

    def create_request(
        self,
        verb: Union[str, Verb],
        url: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        """
        Build a request bound to this client.

        Args:
            verb: HTTP verb of the request
            url: URL relative to the base URL (or absolute when the client
                 has no base URL)
            headers: Optional headers to attach

        Returns:
            The new request

        Raises:
            InvalidArgumentError: If url is not a string, or the verb or the
                                  resulting URL is invalid
        """
        if not isinstance(url, str):
            raise InvalidArgumentError("url must be a string")

        request = self._request_factory.build(verb, self._base_url + url, headers)
        request.set_client(self)
        return request

    def send(self, request: Request) -> Response:
        """
        Send a prepared request.

        Args:
            request: The request to send

        Returns:
            The response

        Raises:
            TransportError: If the transfer fails, after the ERROR handlers ran
            ProtocolError: If the raw response cannot be parsed
        """
        handle = self._get_handle(request.verb)

        if not request.has_header("User-Agent"):
            request.add_header("User-Agent", self.get_user_agent())

        handle.add_options(request.get_options())
        handle.add_option(TransportOption.URL, request.url)
        handle.add_option(TransportOption.HTTPHEADER, request.get_header_lines())
        handle.add_option(TransportOption.USERAGENT, self.get_user_agent())
        self._trigger(Event.REQUEST_BUILT, request)

        try:
            result = handle.execute()
        except TransportError as error:
            self._trigger(Event.ERROR, error)
            raise

        response = ResponseFactory.build(result, handle, request)
        logger.debug(
            f"{request.verb.value} {request.url} -> {response.status} "
            f"({response.transaction_time:.3f}s)"
        )
        self._trigger(Event.RESPONSE_BUILT, response)

        return response

    def get_user_agent(self) -> str:
        """User agent sent with every request."""
        return USER_AGENT

    def register(self, event: Union[str, Event], handler: Handler) -> None:
        """
        Register a callback run when an event occurs.

        Handlers for the same event run in registration order. Exceptions
        raised by a handler propagate to the caller of ``send``.

        Args:
            event: Event member or its string value
            handler: Callable receiving the event payload

        Raises:
            InvalidArgumentError: If the event is unknown or the handler is
                                  not callable
        """
        try:
            key = Event(event)
        except ValueError:
            raise InvalidArgumentError(f"unknown event {event!r}") from None
        if not callable(handler):
            raise InvalidArgumentError("handler must be callable")

        self._events[key].append(handler)

    def _trigger(self, event: Event, payload: Any) -> None:
        for handler in self._events[event]:
            handler(payload)

    def _get_handle(self, verb: Verb) -> TransportHandle:
        handle = self._handles.get(verb)
        if handle is None:
            handle = TransportHandle(self._transport_factory())
            self._handles[verb] = handle
            logger.debug(f"Created transport handle for {verb.value} requests")
        return handle
