"""Base class shared by the futures endpoint groups."""
from typing import Optional

from .client import Client
from .config import Config
from .credentials import load_credentials
from .routes import MarketType, Route, router


class FuturesApi:
    """Holds a transport, a market type and the receive window.

    Subclasses only build parameters and pick a ``Route``; the path comes
    from the market type's route table.
    """

    def __init__(self, client: Client, market_type: MarketType = MarketType.LINEAR, recv_window: int = 5000):
        self.client = client
        self.market_type = market_type
        self.recv_window = recv_window
        self._router = router(market_type)

    @classmethod
    def new(cls, api_key: Optional[str] = None, secret_key: Optional[str] = None, config: Optional[Config] = None, market_type: MarketType = MarketType.LINEAR):
        config = config or Config()
        client = Client(api_key, secret_key, config.rest_host(market_type), config.timeout)
        return cls(client, market_type=market_type, recv_window=config.recv_window)

    @classmethod
    def new_with_env(cls, config: Optional[Config] = None, market_type: MarketType = MarketType.LINEAR):
        """Build from BINANCE_API_KEY / BINANCE_API_SECRET_KEY (or the credentials file)."""
        creds = load_credentials()
        return cls.new(creds.api_key, creds.secret_key, config=config, market_type=market_type)

    def get_api(self, route: Route) -> str:
        return self._router(route)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.close()
