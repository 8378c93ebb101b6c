"""Exception hierarchy shared by the REST transport and the WebSocket session."""
from typing import Optional


UNKNOWN_ERROR_CODE = -1000


class BinanceError(Exception):
    pass


class MissingCredentials(BinanceError):
    """Raised before any I/O when a call needs a key the client was not given."""
    pass


class NetworkError(BinanceError):
    """Connection refused, DNS/TLS failure or timeout. Never retried here."""
    pass


class ApiError(BinanceError):
    """The server answered with a non-2xx status.

    ``code`` is the authoritative discriminant. It is ``None`` only when the
    body was not a ``{"code": ..., "msg": ...}`` object.
    """

    def __init__(self, status: int, code: Optional[int], msg: str):
        super().__init__(f"{status}: [{code}] {msg}")
        self.status = status
        self.code = code
        self.msg = msg

    @property
    def is_unknown(self) -> bool:
        return self.code == UNKNOWN_ERROR_CODE


class DecodeError(BinanceError):
    """A response body or frame did not match the expected shape.

    Only the payload size is kept, never the payload itself.
    """

    def __init__(self, reason: str, payload_size: int):
        super().__init__(f"{reason} (payload: {payload_size} bytes)")
        self.reason = reason
        self.payload_size = payload_size


class HandshakeError(BinanceError):
    pass


class Disconnected(BinanceError):
    pass


class SessionStateError(BinanceError):
    """A WebSocket operation was called in a state that does not allow it."""
    pass


class UnsupportedRoute(BinanceError):
    def __init__(self, market_type, route):
        super().__init__(f"{route} is not available for {market_type}")
        self.market_type = market_type
        self.route = route


class UnknownSymbol(BinanceError):
    def __init__(self, symbol: str):
        super().__init__(f"Unknown symbol: {symbol}")
        self.symbol = symbol
