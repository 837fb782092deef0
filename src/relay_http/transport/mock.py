"""
Mock transport backend for testing.

This module provides an in-memory implementation of TransportBackend
that can be used for unit testing without requiring actual network
connections.
"""

from collections import deque
from typing import Any, Deque, Dict, List, Mapping, Optional, Tuple, Union

from ..options import TransportOption
from .backend import TransportBackend, TransportErrorCode, TransportResult

Reply = Union[bytes, Tuple[int, str]]


class MockTransportBackend(TransportBackend):
    """
    Mock transport backend for testing.

    Replies are served in the order they were queued. A reply is either
    the raw bytes of a response or a ``(code, message)`` tuple that makes
    the execution fail with that error.
    """

    def __init__(self, replies: Optional[List[Reply]] = None, total_time: float = 0.05):
        """
        Initialize the mock backend.

        Args:
            replies: Replies to serve, in order.
            total_time: Value reported for "total_time" after each execution.
        """
        self._replies: Deque[Reply] = deque(replies or [])
        self._total_time = total_time
        self._info: Dict[str, Any] = {}
        self.executions: List[Dict[TransportOption, Any]] = []

    def add_reply(self, reply: Reply) -> None:
        """
        Queue a reply.

        Args:
            reply: Raw response bytes or a ``(code, message)`` failure.
        """
        self._replies.append(reply)

    def execute(self, options: Mapping[TransportOption, Any]) -> TransportResult:
        """
        Record the options and serve the next queued reply.

        An empty queue behaves like a server that sent nothing.
        """
        self.executions.append(dict(options))
        self._info = {
            "effective_url": options.get(TransportOption.URL),
            "total_time": self._total_time,
        }

        if not self._replies:
            return TransportResult(None, TransportErrorCode.GOT_NOTHING, "Empty reply from server")

        reply = self._replies.popleft()
        if isinstance(reply, tuple):
            code, message = reply
            return TransportResult(None, code, message)
        return TransportResult(reply)

    def get_info(self, name: str) -> Optional[Any]:
        return self._info.get(name)

    @property
    def last_options(self) -> Optional[Dict[TransportOption, Any]]:
        """Options of the most recent execution."""
        return self.executions[-1] if self.executions else None

    def reset(self) -> None:
        """Forget queued replies and recorded executions."""
        self._replies.clear()
        self.executions.clear()
        self._info = {}
