"""Stream live futures trades until Ctrl+C.

Shows:
1. Logging and YAML configuration
2. Building a combined stream from several topics
3. Consuming typed events from a queue while the event loop runs
4. Stopping the loop through the keep-running flag
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path so we can import binance_client
sys.path.insert(0, str(Path(__file__).parent.parent))

from binance_client import streams
from binance_client.config import Config
from binance_client.errors import Disconnected
from binance_client.logging_setup import logger, setup_logging
from binance_client.websockets import FuturesWebSockets, queue_handler
from binance_client.ws_models import AggTradeEvent, KlineEvent


async def consume(queue: asyncio.Queue, keep_running: asyncio.Event, limit: int):
    seen = 0
    while seen < limit:
        event = await queue.get()
        seen += 1
        if isinstance(event, AggTradeEvent):
            logger.info(f"{event.symbol} trade {event.qty} @ {event.price}")
        elif isinstance(event, KlineEvent) and event.kline.is_final_bar:
            logger.info(f"{event.symbol} {event.kline.interval} closed at {event.kline.close}")
    keep_running.clear()


async def main():
    config_file = Path(__file__).parent.parent / "config.yaml"
    config = Config.from_yaml(str(config_file)) if config_file.exists() else Config()
    setup_logging(log_file=config.log_file, level=config.log_level, enable_console=True)

    topics = [
        streams.agg_trade_stream("btcusdt"),
        streams.agg_trade_stream("ethusdt"),
        streams.kline_stream("btcusdt", "1m"),
    ]

    queue = asyncio.Queue()
    keep_running = asyncio.Event()
    keep_running.set()

    async with FuturesWebSockets(queue_handler(queue), config=config) as socket:
        await socket.connect_multiple(topics)
        logger.info(f"Connected to {socket.base_url} for {len(topics)} streams")

        consumer = asyncio.create_task(consume(queue, keep_running, limit=200))
        try:
            await socket.event_loop(keep_running, poll_interval=1.0)
        except Disconnected as e:
            logger.warning(f"Stream ended: {e}")
        finally:
            consumer.cancel()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
