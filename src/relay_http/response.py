"""
HTTP response type for relay_http.
"""

import json
from numbers import Real
from typing import TYPE_CHECKING, Any, Optional

from .exceptions import ClientStateError, ResponseFormatError
from .message import Message

if TYPE_CHECKING:
    from .request import Request


class Response(Message):
    """
    HTTP response representation.

    Responses are created empty by ``ResponseFactory`` and filled while
    the raw transport output is parsed. Once handed to the caller they
    are not expected to change.
    """

    def __init__(self) -> None:
        super().__init__()
        self._status: Optional[int] = None
        self._transaction_time = 0.0
        self._request: Optional["Request"] = None

    def __repr__(self) -> str:
        return f"<Response [{self._status}]>"

    @property
    def status(self) -> Optional[int]:
        """The HTTP status code."""
        return self._status

    @status.setter
    def status(self, value: int) -> None:
        self._status = int(value)

    @property
    def transaction_time(self) -> float:
        """Duration of the transfer, in seconds."""
        return self._transaction_time

    @transaction_time.setter
    def transaction_time(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ResponseFormatError(f"transaction time must be a number, got {value!r}")
        if value < 0:
            raise ResponseFormatError(f"transaction time must be positive, got {value!r}")
        self._transaction_time = float(value)

    @property
    def request(self) -> Optional["Request"]:
        """The request this response answers."""
        return self._request

    @request.setter
    def request(self, request: "Request") -> None:
        if self._request is not None:
            raise ClientStateError("The response is already bound to a request")
        self._request = request

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
            ResponseFormatError: If the body is not valid JSON
        """
        body = self._body if self._body is not None else ""
        try:
            return json.loads(body)
        except ValueError as e:
            raise ResponseFormatError(f"body is not valid JSON: {e}", cause=e) from e
