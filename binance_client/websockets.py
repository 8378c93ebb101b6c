"""Futures WebSocket session using aiohttp.

One session owns at most one socket. Frames are read, decoded and handed
to the handler strictly one at a time, in wire order. Any decode failure or
handler exception ends ``event_loop``; nothing is skipped.

Cancellation: ``keep_running`` is checked between frames. Without
``poll_interval`` a silent upstream can hold the loop in ``receive``
indefinitely; with it, each wait is bounded and the flag is re-checked at
least every ``poll_interval`` seconds. Cancelling the task that runs the
loop stops it immediately.
"""
import asyncio
import inspect
from enum import Enum
from typing import Any, Callable, Iterable, Optional

import aiohttp
from aiohttp import WSMsgType
from yarl import URL

from .config import Config
from .errors import DecodeError, Disconnected, HandshakeError, SessionStateError
from .logging_setup import logger
from .routes import MarketType
from .streams import combined_stream_url, single_stream_url
from .ws_models import FuturesWebsocketEvent, decode_event

_CLOSE_TYPES = (WSMsgType.CLOSE, WSMsgType.CLOSING, WSMsgType.CLOSED)

Handler = Callable[[FuturesWebsocketEvent], Any]


class SessionState(Enum):
    IDLE = "idle"
    CONNECTED = "connected"
    CLOSED = "closed"


def queue_handler(queue: asyncio.Queue) -> Handler:
    """Handler that forwards every event to ``queue`` for another task to consume."""
    def _forward(event: FuturesWebsocketEvent) -> None:
        queue.put_nowait(event)
    return _forward


class FuturesWebSockets:
    """Single or combined stream connection with a user handler.

    The handler may be a plain function or a coroutine function. Returning
    normally means "continue"; raising stops the loop with that exception.

    Usage:
        keep_running = asyncio.Event()
        keep_running.set()
        ws = FuturesWebSockets(on_event)
        await ws.connect_multiple([agg_trade_stream("ethusdt"), trade_stream("btcusdt")])
        try:
            await ws.event_loop(keep_running)
        finally:
            await ws.disconnect()
    """

    def __init__(self, handler: Handler, config: Optional[Config] = None, market_type: MarketType = MarketType.LINEAR):
        self._handler = handler
        self.config = config or Config()
        self.market_type = market_type
        self._session: Optional[aiohttp.ClientSession] = None
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None
        self._state = SessionState.IDLE

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._ws is not None:
            await self.disconnect()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is SessionState.CONNECTED

    @property
    def base_url(self) -> str:
        return self.config.futures_ws_host(self.market_type)

    async def connect(self, topic: str) -> None:
        """Connect to ``<ws-base>/ws/<topic>``."""
        await self._handle_connect(single_stream_url(self.base_url, topic))

    async def connect_multiple(self, topics: Iterable[str]) -> None:
        """Connect to ``<ws-base>/stream?streams=<t1>/<t2>/...``.

        Frames arrive wrapped as ``{"stream": ..., "data": ...}``.
        """
        await self._handle_connect(combined_stream_url(self.base_url, topics))

    async def _handle_connect(self, url: str) -> None:
        if self._state is SessionState.CONNECTED:
            raise SessionStateError("Session is already connected; disconnect first")
        await self._release()

        session = aiohttp.ClientSession()
        try:
            ws = await session.ws_connect(URL(url, encoded=True))
        except BaseException as e:
            await session.close()
            self._state = SessionState.IDLE
            if isinstance(e, (aiohttp.ClientError, asyncio.TimeoutError)):
                raise HandshakeError(f"Error during handshake with {url}: {e}") from e
            raise

        self._session = session
        self._ws = ws
        self._state = SessionState.CONNECTED
        logger.info(f"WebSocket connected | url={url}")

    async def disconnect(self) -> None:
        """Send a close frame and release the connection."""
        if self._ws is None:
            raise SessionStateError("Not able to close the connection")
        try:
            await self._ws.close()
        finally:
            await self._release()
            self._state = SessionState.CLOSED
        logger.info("WebSocket disconnected")

    async def _release(self) -> None:
        self._ws = None
        if self._session is not None:
            session, self._session = self._session, None
            await session.close()

    async def _dispatch(self, event: FuturesWebsocketEvent) -> None:
        result = self._handler(event)
        if inspect.isawaitable(result):
            await result

    def _closed(self, reason: str) -> Disconnected:
        self._state = SessionState.CLOSED
        logger.warning(f"WebSocket loop stopped | {reason}")
        return Disconnected(f"Disconnected: {reason}")

    async def event_loop(self, keep_running, *, poll_interval: Optional[float] = None) -> None:
        """Read, decode and dispatch frames while ``keep_running.is_set()``.

        Args:
            keep_running: any object with ``is_set()``, e.g. asyncio.Event
            poll_interval: max seconds to wait for one frame before
                re-checking ``keep_running``; None waits indefinitely

        Raises:
            Disconnected: close frame received or the read failed
            DecodeError: a text frame could not be decoded
            SessionStateError: called without a live connection
        """
        if self._ws is None or self._state is not SessionState.CONNECTED:
            raise SessionStateError("event_loop requires a connected session")

        while keep_running.is_set():
            try:
                msg = await self._ws.receive(timeout=poll_interval)
            except asyncio.TimeoutError:
                continue
            except (aiohttp.ClientError, OSError) as e:
                raise self._closed(f"read failed: {e}") from e

            if msg.type == WSMsgType.TEXT:
                try:
                    event = decode_event(msg.data)
                except DecodeError as e:
                    logger.error(f"Undecodable frame, stopping loop: {e}")
                    raise
                await self._dispatch(event)
            elif msg.type in _CLOSE_TYPES:
                raise self._closed(f"close frame {msg.data!r} {msg.extra!r}")
            elif msg.type == WSMsgType.ERROR:
                cause = msg.data if isinstance(msg.data, BaseException) else None
                raise self._closed(f"read failed: {msg.data}") from cause
            else:
                logger.debug(f"Ignoring {msg.type.name} frame")
