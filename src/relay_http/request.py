"""
HTTP request types for relay_http.

Each supported verb has its own request class. The classes only differ
in the transport options they contribute in ``prepare``, which runs
when the request is sent so that anything set after construction
(such as the body) is taken into account.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Mapping, Optional, Union

from typing_extensions import Self

from .exceptions import ClientNotBoundError
from .message import Message
from .options import TransportOption, Verb, coerce_option

if TYPE_CHECKING:
    from .client import Client
    from .response import Response


class Request(Message, ABC):
    """
    Base HTTP request.

    A request holds an absolute URL, a set of transport options and a
    reference to the client that will send it. Use the concrete
    subclasses (or ``Client.get`` and friends) to build one.
    """

    verb: ClassVar[Verb]

    def __init__(self, url: str, headers: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(headers)
        self._url = url
        self._options: Dict[TransportOption, Any] = {}
        self._client: Optional["Client"] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.verb.value} {self._url}>"

    @property
    def url(self) -> str:
        """The absolute URL targeted by the request."""
        return self._url

    @property
    def client(self) -> Optional["Client"]:
        """The client that will send the request, if any."""
        return self._client

    def set_client(self, client: "Client") -> Self:
        """Attach the client used by ``send``."""
        self._client = client
        return self

    def get_options(self) -> Dict[TransportOption, Any]:
        """Get a copy of the transport options of the request."""
        return dict(self._options)

    def add_option(self, key: Union[str, TransportOption], value: Any) -> Self:
        """
        Set a transport option for this request.

        Args:
            key: TransportOption member or its string value
            value: Option value, passed to the transport as is

        Returns:
            The request itself

        Raises:
            InvalidArgumentError: If the key is not a known transport option
        """
        self._options[coerce_option(key)] = value
        return self

    def add_options(self, options: Mapping[Union[str, TransportOption], Any]) -> Self:
        """Set several transport options at once."""
        for key, value in options.items():
            self.add_option(key, value)
        return self

    @abstractmethod
    def prepare(self) -> None:
        """Write the verb-specific transport options."""
        pass

    def send(self) -> "Response":
        """
        Send the request through the attached client.

        Returns:
            The response built from the transport output

        Raises:
            ClientNotBoundError: If no client is attached to the request
            TransportError: If the transport fails
            ProtocolError: If the raw response cannot be parsed
        """
        if self._client is None:
            raise ClientNotBoundError()

        self.prepare()
        return self._client.send(self)

    def _body_option(self) -> Any:
        return self._body if self.has_body() else False


class GetRequest(Request):
    verb = Verb.GET

    def prepare(self) -> None:
        self._options[TransportOption.HTTPGET] = True


class PostRequest(Request):
    verb = Verb.POST

    def prepare(self) -> None:
        self._options[TransportOption.POST] = True
        self._options[TransportOption.POSTFIELDS] = self._body_option()


class HeadRequest(Request):
    verb = Verb.HEAD

    def prepare(self) -> None:
        self._options[TransportOption.NOBODY] = True


class PutRequest(Request):
    verb = Verb.PUT

    def prepare(self) -> None:
        self._options[TransportOption.CUSTOMREQUEST] = "PUT"
        self._options[TransportOption.POSTFIELDS] = self._body_option()


class DeleteRequest(Request):
    verb = Verb.DELETE

    def prepare(self) -> None:
        self._options[TransportOption.CUSTOMREQUEST] = "DELETE"
        self._options[TransportOption.POSTFIELDS] = self._body_option()


# Closed set of request variants, one per supported verb.
REQUEST_TYPES: Dict[Verb, type] = {
    Verb.GET: GetRequest,
    Verb.POST: PostRequest,
    Verb.HEAD: HeadRequest,
    Verb.PUT: PutRequest,
    Verb.DELETE: DeleteRequest,
}
