"""Logical futures operations and their per-market URL paths.

Both market families share the ``Route`` enumeration; each has a static
path table. Asking a table for a route it does not define raises
``UnsupportedRoute`` instead of producing an empty path.
"""
from enum import Enum
from typing import Callable, Dict

from .errors import UnsupportedRoute


class MarketType(Enum):
    LINEAR = "linear"    # USD-M, margined in the quote asset
    INVERSE = "inverse"  # COIN-M, margined in the base asset

    @property
    def rest_endpoint(self) -> str:
        return _REST_ENDPOINTS[self]

    @property
    def ws_endpoint(self) -> str:
        return _WS_ENDPOINTS[self]


_REST_ENDPOINTS = {
    MarketType.LINEAR: "https://fapi.binance.com",
    MarketType.INVERSE: "https://dapi.binance.com",
}

_WS_ENDPOINTS = {
    MarketType.LINEAR: "wss://fstream.binance.com",
    MarketType.INVERSE: "wss://dstream.binance.com",
}


class Route(Enum):
    PING = "ping"
    TIME = "time"
    EXCHANGE_INFO = "exchange_info"
    DEPTH = "depth"
    TRADES = "trades"
    HISTORICAL_TRADES = "historical_trades"
    AGG_TRADES = "agg_trades"
    KLINES = "klines"
    PREMIUM_INDEX = "premium_index"
    FUNDING_RATE = "funding_rate"
    TICKER_24H = "ticker_24h"
    TICKER_PRICE = "ticker_price"
    BOOK_TICKER = "book_ticker"
    OPEN_INTEREST = "open_interest"
    ORDER = "order"
    OPEN_ORDERS = "open_orders"
    ALL_OPEN_ORDERS = "all_open_orders"
    ALL_ORDERS = "all_orders"
    POSITION_RISK = "position_risk"
    ACCOUNT = "account"
    BALANCE = "balance"
    CHANGE_INITIAL_LEVERAGE = "change_initial_leverage"
    MARGIN_TYPE = "margin_type"
    POSITION_SIDE = "position_side"
    USER_TRADES = "user_trades"
    USER_DATA_STREAM = "user_data_stream"
    MULTI_ASSETS_MARGIN = "multi_assets_margin"


LINEAR_ROUTES: Dict[Route, str] = {
    Route.PING: "/fapi/v1/ping",
    Route.TIME: "/fapi/v1/time",
    Route.EXCHANGE_INFO: "/fapi/v1/exchangeInfo",
    Route.DEPTH: "/fapi/v1/depth",
    Route.TRADES: "/fapi/v1/trades",
    Route.HISTORICAL_TRADES: "/fapi/v1/historicalTrades",
    Route.AGG_TRADES: "/fapi/v1/aggTrades",
    Route.KLINES: "/fapi/v1/klines",
    Route.PREMIUM_INDEX: "/fapi/v1/premiumIndex",
    Route.FUNDING_RATE: "/fapi/v1/fundingRate",
    Route.TICKER_24H: "/fapi/v1/ticker/24hr",
    Route.TICKER_PRICE: "/fapi/v1/ticker/price",
    Route.BOOK_TICKER: "/fapi/v1/ticker/bookTicker",
    Route.OPEN_INTEREST: "/fapi/v1/openInterest",
    Route.ORDER: "/fapi/v1/order",
    Route.OPEN_ORDERS: "/fapi/v1/openOrders",
    Route.ALL_OPEN_ORDERS: "/fapi/v1/allOpenOrders",
    Route.ALL_ORDERS: "/fapi/v1/allOrders",
    Route.POSITION_RISK: "/fapi/v2/positionRisk",
    Route.ACCOUNT: "/fapi/v2/account",
    Route.BALANCE: "/fapi/v2/balance",
    Route.CHANGE_INITIAL_LEVERAGE: "/fapi/v1/leverage",
    Route.MARGIN_TYPE: "/fapi/v1/marginType",
    Route.POSITION_SIDE: "/fapi/v1/positionSide/dual",
    Route.USER_TRADES: "/fapi/v1/userTrades",
    Route.USER_DATA_STREAM: "/fapi/v1/listenKey",
    Route.MULTI_ASSETS_MARGIN: "/fapi/v1/multiAssetsMargin",
}

# COIN-M has no multi-assets mode.
INVERSE_ROUTES: Dict[Route, str] = {
    Route.PING: "/dapi/v1/ping",
    Route.TIME: "/dapi/v1/time",
    Route.EXCHANGE_INFO: "/dapi/v1/exchangeInfo",
    Route.DEPTH: "/dapi/v1/depth",
    Route.TRADES: "/dapi/v1/trades",
    Route.HISTORICAL_TRADES: "/dapi/v1/historicalTrades",
    Route.AGG_TRADES: "/dapi/v1/aggTrades",
    Route.KLINES: "/dapi/v1/klines",
    Route.PREMIUM_INDEX: "/dapi/v1/premiumIndex",
    Route.FUNDING_RATE: "/dapi/v1/fundingRate",
    Route.TICKER_24H: "/dapi/v1/ticker/24hr",
    Route.TICKER_PRICE: "/dapi/v1/ticker/price",
    Route.BOOK_TICKER: "/dapi/v1/ticker/bookTicker",
    Route.OPEN_INTEREST: "/dapi/v1/openInterest",
    Route.ORDER: "/dapi/v1/order",
    Route.OPEN_ORDERS: "/dapi/v1/openOrders",
    Route.ALL_OPEN_ORDERS: "/dapi/v1/allOpenOrders",
    Route.ALL_ORDERS: "/dapi/v1/allOrders",
    Route.POSITION_RISK: "/dapi/v1/positionRisk",
    Route.ACCOUNT: "/dapi/v1/account",
    Route.BALANCE: "/dapi/v1/balance",
    Route.CHANGE_INITIAL_LEVERAGE: "/dapi/v1/leverage",
    Route.MARGIN_TYPE: "/dapi/v1/marginType",
    Route.POSITION_SIDE: "/dapi/v1/positionSide/dual",
    Route.USER_TRADES: "/dapi/v1/userTrades",
    Route.USER_DATA_STREAM: "/dapi/v1/listenKey",
}

_TABLES = {
    MarketType.LINEAR: LINEAR_ROUTES,
    MarketType.INVERSE: INVERSE_ROUTES,
}


def resolve(market_type: MarketType, route: Route) -> str:
    try:
        return _TABLES[market_type][route]
    except KeyError:
        raise UnsupportedRoute(market_type, route) from None


def router(market_type: MarketType) -> Callable[[Route], str]:
    """Bind ``resolve`` to one market type."""
    def _resolve(route: Route) -> str:
        return resolve(market_type, route)
    return _resolve
