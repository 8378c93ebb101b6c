from .api import FuturesApi
from .errors import UnknownSymbol
from .rest_models import ExchangeInformation, ServerTime, Success, Symbol
from .routes import Route


class FuturesGeneral(FuturesApi):
    """Connectivity, server time and exchange metadata."""

    async def ping(self) -> Success:
        return await self.client.get(self.get_api(Route.PING), model=Success)

    async def get_server_time(self) -> ServerTime:
        return await self.client.get(self.get_api(Route.TIME), model=ServerTime)

    async def exchange_info(self) -> ExchangeInformation:
        return await self.client.get(self.get_api(Route.EXCHANGE_INFO), model=ExchangeInformation)

    async def get_symbol_info(self, symbol: str) -> Symbol:
        upper_symbol = symbol.upper()
        info = await self.exchange_info()
        for item in info.symbols:
            if item.symbol == upper_symbol:
                return item
        raise UnknownSymbol(symbol)
