"""Stream topic names and the URLs that carry them.

Builders only format; they do not validate levels or speeds.
"""
from typing import Iterable

PARTIAL_DEPTH_LEVELS = (5, 10, 20)
DEPTH_UPDATE_SPEEDS = (100, 1000)


def agg_trade_stream(symbol: str) -> str:
    return f"{symbol.lower()}@aggTrade"


def trade_stream(symbol: str) -> str:
    return f"{symbol.lower()}@trade"


def kline_stream(symbol: str, interval: str) -> str:
    return f"{symbol.lower()}@kline_{interval}"


def mini_ticker_stream(symbol: str) -> str:
    return f"{symbol.lower()}@miniTicker"


def all_mini_ticker_stream() -> str:
    return "!miniTicker@arr"


def ticker_stream(symbol: str) -> str:
    return f"{symbol.lower()}@ticker"


def all_ticker_stream() -> str:
    return "!ticker@arr"


def book_ticker_stream(symbol: str) -> str:
    return f"{symbol.lower()}@bookTicker"


def all_book_ticker_stream() -> str:
    return "!bookTicker"


def partial_book_depth_stream(symbol: str, levels: int, update_speed: int) -> str:
    """Top ``levels`` (see PARTIAL_DEPTH_LEVELS) of the book every ``update_speed`` ms (see DEPTH_UPDATE_SPEEDS)."""
    return f"{symbol.lower()}@depth{levels}@{update_speed}ms"


def diff_book_depth_stream(symbol: str, update_speed: int) -> str:
    """Order book diffs every ``update_speed`` ms, one of DEPTH_UPDATE_SPEEDS."""
    return f"{symbol.lower()}@depth@{update_speed}ms"


def combined_stream(topics: Iterable[str]) -> str:
    return "/".join(topics)


def single_stream_url(base: str, topic: str) -> str:
    return f"{base.rstrip('/')}/ws/{topic}"


def combined_stream_url(base: str, topics: Iterable[str]) -> str:
    return f"{base.rstrip('/')}/stream?streams={combined_stream(topics)}"
