"""
Enumerations shared by requests, transport handles and backends.
"""

from enum import Enum
from typing import Union

from .exceptions import InvalidArgumentError


class Verb(str, Enum):
    """HTTP methods supported by the client."""
    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"
    PUT = "PUT"
    DELETE = "DELETE"


class TransportOption(str, Enum):
    """
    Keys understood by transport backends.

    Requests and handles store their options in mappings keyed by these
    members. The string values may be used wherever a key is accepted.
    """
    URL = "url"
    HTTPGET = "httpget"             # plain body-less fetch
    POST = "post"                   # send a POST request
    POSTFIELDS = "postfields"       # request body, False when there is none
    CUSTOMREQUEST = "customrequest" # method string overriding the default
    NOBODY = "nobody"               # do not expect a response body
    HTTPHEADER = "httpheader"       # list of "Name: value" lines
    USERAGENT = "useragent"
    TIMEOUT = "timeout"             # seconds for the whole transfer


def coerce_option(key: Union[str, TransportOption]) -> TransportOption:
    """
    Convert a transport option key to a TransportOption member.

    Args:
        key: A TransportOption member or its string value (case-insensitive)

    Returns:
        The matching TransportOption

    Raises:
        InvalidArgumentError: If the key is not a known option
    """
    if isinstance(key, TransportOption):
        return key
    if isinstance(key, str):
        try:
            return TransportOption(key.lower())
        except ValueError:
            pass
    raise InvalidArgumentError(f"unknown transport option {key!r}")


def coerce_verb(verb: Union[str, Verb]) -> Verb:
    """
    Convert a verb name to a Verb member.

    Raises:
        InvalidArgumentError: If the verb is not one of the supported methods
    """
    if isinstance(verb, Verb):
        return verb
    if isinstance(verb, str):
        try:
            return Verb(verb.upper())
        except ValueError:
            pass
    raise InvalidArgumentError(f"unsupported HTTP verb {verb!r}")
