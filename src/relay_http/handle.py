"""
Transport handle for relay_http.

A TransportHandle wraps one backend session together with the options
accumulated for it, and turns backend failures into TransportError.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import TransportError
from .options import TransportOption, coerce_option
from .transport.backend import TransportBackend, TransportErrorCode

logger = logging.getLogger(__name__)


class TransportHandle:
    """
    Backend session with a cumulative set of options.

    Options are never cleared: each ``add_option`` call merges into the
    existing set and the last write for a key wins. A handle reused for
    several executions therefore keeps every option it was given until
    that option is overwritten.
    """

    def __init__(self, backend: TransportBackend) -> None:
        """
        Initialize the handle.

        Args:
            backend: The backend session owned by this handle
        """
        self._backend = backend
        self._options: Dict[TransportOption, Any] = {}
        self._execution_count = 0

    @property
    def backend(self) -> TransportBackend:
        return self._backend

    def add_option(self, key: Union[str, TransportOption], value: Any) -> "TransportHandle":
        self._options[coerce_option(key)] = value
        return self

    def add_options(self, options: Mapping[Union[str, TransportOption], Any]) -> "TransportHandle":
        for key, value in options.items():
            self.add_option(key, value)
        return self

    def get_options(self) -> Dict[TransportOption, Any]:
        """Get a copy of the accumulated options."""
        return dict(self._options)

    def execute(self) -> bytes:
        """
        Run the backend with all accumulated options.

        Returns:
            The raw response bytes

        Raises:
            TransportError: If the backend reports a failure or no data
        """
        self._execution_count += 1
        url = self._options.get(TransportOption.URL)
        logger.debug(f"Executing transfer {self._execution_count} for {url}")

        result = self._backend.execute(dict(self._options))

        if result.failed:
            # an empty reply without an error code is still a failure
            code = result.error_code or TransportErrorCode.GOT_NOTHING
            message = result.error_message or "No data received"
            logger.error(f"Transfer {self._execution_count} for {url} failed: [{code}] {message}")
            raise TransportError(int(code), message)

        return result.data

    def get_info(self, name: str) -> Optional[Any]:
        """Get metadata about the last execution from the backend."""
        return self._backend.get_info(name)
