"""
Transport backend interface for relay_http.

This module defines the TransportBackend interface used by transport
handles to perform a single HTTP exchange from a mapping of options.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Mapping, NamedTuple, Optional

from ..options import TransportOption


class TransportErrorCode(IntEnum):
    """Error codes reported by backends, numbered like libcurl's."""
    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    WEIRD_SERVER_REPLY = 8
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    BAD_FUNCTION_ARGUMENT = 43
    GOT_NOTHING = 52
    SEND_ERROR = 55
    RECV_ERROR = 56


class TransportResult(NamedTuple):
    """Outcome of one backend execution."""
    data: Optional[bytes]
    error_code: int = TransportErrorCode.OK
    error_message: str = ""

    @property
    def failed(self) -> bool:
        return self.error_code != TransportErrorCode.OK or not self.data


class TransportBackend(ABC):
    """
    Interface for transport backend implementations.

    A backend performs one HTTP exchange per ``execute`` call and
    returns the raw bytes received, status line and headers included.
    Failures are reported through the result, not raised.
    """

    @abstractmethod
    def execute(self, options: Mapping[TransportOption, Any]) -> TransportResult:
        """
        Perform the exchange described by the options.

        Args:
            options: Transport options accumulated by the handle. At minimum
                     ``TransportOption.URL`` is present.

        Returns:
            A TransportResult holding the raw response bytes, or an error
            code and message on failure.
        """
        pass

    @abstractmethod
    def get_info(self, name: str) -> Optional[Any]:
        """
        Get information about the last execution.

        Args:
            name: The name of the information to retrieve. Common values include:
                 - "total_time": Duration of the exchange in seconds
                 - "effective_url": The URL that was requested

        Returns:
            The requested information or None if not available.
        """
        pass
