"""Print server time, balances and open positions for one futures market.

Run with BINANCE_API_KEY / BINANCE_API_SECRET_KEY set, optionally with
``--inverse`` for the COIN-M market.
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path so we can import binance_client
sys.path.insert(0, str(Path(__file__).parent.parent))

from binance_client.config import Config
from binance_client.errors import ApiError, MissingCredentials
from binance_client.futures import Futures
from binance_client.logging_setup import logger, setup_logging
from binance_client.routes import MarketType


async def main(market_type: MarketType):
    setup_logging(log_file=None, level="INFO", enable_console=True)
    config = Config()

    async with Futures.from_env(config=config, market_type=market_type) as futures:
        server_time = await futures.general.get_server_time()
        logger.info(f"Server time: {server_time.server_time}")

        try:
            balances = await futures.account.account_balance()
        except MissingCredentials as e:
            logger.error(f"{e}; set BINANCE_API_KEY and BINANCE_API_SECRET_KEY")
            return
        except ApiError as e:
            logger.error(f"Balance request rejected: {e}")
            return

        for balance in balances:
            if balance.balance:
                logger.info(f"{balance.asset}: {balance.balance} (available {balance.available_balance})")


if __name__ == "__main__":
    market = MarketType.INVERSE if "--inverse" in sys.argv else MarketType.LINEAR
    asyncio.run(main(market))
