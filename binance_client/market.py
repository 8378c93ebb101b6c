from typing import List, Optional

from .api import FuturesApi
from .rest_models import KlineSummary, OrderBook
from .routes import Route
from .signer import build_request


class FuturesMarket(FuturesApi):
    """Public market data. Symbols are sent upper-case."""

    async def get_depth(self, symbol: str, limit: Optional[int] = None) -> OrderBook:
        query = build_request([("symbol", symbol.upper()), ("limit", limit)])
        return await self.client.get(self.get_api(Route.DEPTH), query, model=OrderBook)

    async def get_trades(self, symbol: str, limit: Optional[int] = None) -> list:
        query = build_request([("symbol", symbol.upper()), ("limit", limit)])
        return await self.client.get(self.get_api(Route.TRADES), query)

    async def get_agg_trades(
        self,
        symbol: str,
        from_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list:
        query = build_request([
            ("symbol", symbol.upper()),
            ("fromId", from_id),
            ("startTime", start_time),
            ("endTime", end_time),
            ("limit", limit),
        ])
        return await self.client.get(self.get_api(Route.AGG_TRADES), query)

    async def get_klines(
        self,
        symbol: str,
        interval: str,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> List[KlineSummary]:
        query = build_request([
            ("symbol", symbol.upper()),
            ("interval", interval),
            ("startTime", start_time),
            ("endTime", end_time),
            ("limit", limit),
        ])
        return await self.client.get(self.get_api(Route.KLINES), query, model=List[KlineSummary])

    async def get_24h_price_stats(self, symbol: str):
        query = build_request([("symbol", symbol.upper())])
        return await self.client.get(self.get_api(Route.TICKER_24H), query)

    async def get_price(self, symbol: str):
        query = build_request([("symbol", symbol.upper())])
        return await self.client.get(self.get_api(Route.TICKER_PRICE), query)

    async def get_all_book_tickers(self) -> list:
        return await self.client.get(self.get_api(Route.BOOK_TICKER))

    async def get_book_ticker(self, symbol: str):
        query = build_request([("symbol", symbol.upper())])
        return await self.client.get(self.get_api(Route.BOOK_TICKER), query)

    async def get_mark_prices(self, symbol: Optional[str] = None):
        """Mark price and funding info; all symbols when ``symbol`` is None."""
        query = build_request([("symbol", symbol.upper() if symbol else None)])
        return await self.client.get(self.get_api(Route.PREMIUM_INDEX), query or None)

    async def open_interest(self, symbol: str):
        query = build_request([("symbol", symbol.upper())])
        return await self.client.get(self.get_api(Route.OPEN_INTEREST), query)

    async def get_funding_rate(
        self,
        symbol: str,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list:
        query = build_request([
            ("symbol", symbol.upper()),
            ("startTime", start_time),
            ("endTime", end_time),
            ("limit", limit),
        ])
        return await self.client.get(self.get_api(Route.FUNDING_RATE), query)
