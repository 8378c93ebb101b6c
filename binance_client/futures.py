from typing import Optional

from .account import FuturesAccount
from .client import Client
from .config import Config
from .credentials import load_credentials
from .general import FuturesGeneral
from .market import FuturesMarket
from .routes import MarketType
from .userstream import UserStream


class Futures:
    """All endpoint groups of one market type over one connection pool.

    Usage:
        async with Futures(api_key, secret_key, market_type=MarketType.INVERSE) as futures:
            await futures.general.ping()
            balances = await futures.account.account_balance()
    """

    def __init__(self, api_key: Optional[str] = None, secret_key: Optional[str] = None, config: Optional[Config] = None, market_type: MarketType = MarketType.LINEAR):
        self.config = config or Config()
        self.market_type = market_type
        self.client = Client(api_key, secret_key, self.config.rest_host(market_type), self.config.timeout)

        recv_window = self.config.recv_window
        self.general = FuturesGeneral(self.client.clone(), market_type, recv_window)
        self.market = FuturesMarket(self.client.clone(), market_type, recv_window)
        self.account = FuturesAccount(self.client.clone(), market_type, recv_window)
        self.userstream = UserStream(self.client.clone(), market_type, recv_window)

    @classmethod
    def from_env(cls, config: Optional[Config] = None, market_type: MarketType = MarketType.LINEAR) -> "Futures":
        creds = load_credentials()
        return cls(creds.api_key, creds.secret_key, config=config, market_type=market_type)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
