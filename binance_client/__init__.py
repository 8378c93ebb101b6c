"""
Async Binance Futures client.

REST and streaming access to the USD-M (linear) and COIN-M (inverse)
futures markets:
- HMAC-SHA256 signed requests with optional receive window
- One route table per market family behind a shared Route enumeration
- Typed API errors keyed by the server's error code
- Combined-stream WebSocket sessions decoded into typed events
- Structured logging via loguru
- Configuration-driven (YAML)

Core Modules:
    signer: canonical query strings and signatures
    client: async HTTP transport (aiohttp)
    routes: market types and their URL paths
    streams: stream topic names and WebSocket URLs
    ws_models: event models and the frame decoder
    websockets: WebSocket session and event loop
    general, market, account, userstream: endpoint groups
    futures: all endpoint groups over one connection pool
    config: configuration loading
    credentials: API key management

Example:
    >>> from binance_client.futures import Futures
    >>> from binance_client.credentials import load_credentials
    >>>
    >>> creds = load_credentials()
    >>> async with Futures(creds.api_key, creds.secret_key) as futures:
    ...     server_time = await futures.general.get_server_time()
"""

__version__ = "0.1.0"
__all__ = [
    "signer",
    "client",
    "routes",
    "streams",
    "ws_models",
    "websockets",
    "general",
    "market",
    "account",
    "userstream",
    "futures",
    "rest_models",
    "errors",
    "config",
    "credentials",
]
