"""Canonical query strings and HMAC-SHA256 request signing.

The signed payload is::

    [recvWindow=W&]timestamp=<ms>[&k=v...]

``recvWindow`` only appears when the window is positive; leaving it out
changes the bytes that get signed, so callers must not add it themselves.
Values are used as given: no percent-encoding is applied here.
"""
import hashlib
import hmac
import time
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .errors import MissingCredentials

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def get_timestamp() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def bool_to_string(b: bool) -> str:
    return "TRUE" if b else "FALSE"


def format_value(value: Any) -> str:
    """Render a parameter value the same way in every process.

    Floats go through their shortest round-trip repr and are then written
    without an exponent, so 1e-07 becomes ``0.0000001``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


def _pairs(params: Optional[Params]):
    if params is None:
        return
    items = params.items() if isinstance(params, Mapping) else params
    for key, value in items:
        if not key or value is None:
            continue
        yield f"{key}={format_value(value)}"


def build_request(params: Optional[Params]) -> str:
    """Unsigned query string, caller order preserved."""
    return "&".join(_pairs(params))


def build_signed_request(params: Optional[Params], recv_window: int, timestamp: Optional[int] = None) -> str:
    """Query string to be signed: recvWindow (if > 0), timestamp, then params."""
    if recv_window < 0:
        raise ValueError(f"recv_window must be >= 0, got {recv_window}")
    head = []
    if recv_window > 0:
        head.append(f"recvWindow={recv_window}")
    head.append(f"timestamp={get_timestamp() if timestamp is None else timestamp}")
    return "&".join(head + list(_pairs(params)))


def sign(query: str, secret_key: Optional[str]) -> str:
    """Hex HMAC-SHA256 of ``query`` keyed with the secret."""
    if not secret_key:
        raise MissingCredentials("Secret key is required for signed requests")
    return hmac.new(secret_key.encode("utf-8"), query.encode("utf-8"), hashlib.sha256).hexdigest()


def signed_query(query: str, secret_key: Optional[str]) -> str:
    return f"{query}&signature={sign(query, secret_key)}"
