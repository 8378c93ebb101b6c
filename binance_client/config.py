"""Client configuration.

Supports YAML format with environment variable interpolation.
"""
import os
from dataclasses import asdict, dataclass
from pathlib import Path

import yaml

from .routes import MarketType

TESTNET_FUTURES_REST = "https://testnet.binancefuture.com"
TESTNET_FUTURES_WS = "wss://stream.binancefuture.com"


@dataclass
class Config:
    """Hosts, receive window and timeouts.

    Empty futures endpoints mean "use the market type's own host", which is
    how one config serves both linear and inverse clients.
    """
    futures_rest_api_endpoint: str = ""
    futures_ws_endpoint: str = ""
    recv_window: int = 5000
    timeout: int = 10
    log_file: str = "binance_client.log"
    log_level: str = "INFO"

    @classmethod
    def testnet(cls) -> "Config":
        return cls(
            futures_rest_api_endpoint=TESTNET_FUTURES_REST,
            futures_ws_endpoint=TESTNET_FUTURES_WS,
        )

    def rest_host(self, market_type: MarketType) -> str:
        return self.futures_rest_api_endpoint or market_type.rest_endpoint

    def futures_ws_host(self, market_type: MarketType) -> str:
        return self.futures_ws_endpoint or market_type.ws_endpoint

    @classmethod
    def from_yaml(cls, config_path: str) -> "Config":
        """Load configuration from YAML file with env var interpolation.

        Args:
            config_path: Path to YAML config file

        Returns:
            Config instance

        Example YAML:
            futures_rest_api_endpoint: "${FUTURES_HOST}"
            recv_window: 5000
            timeout: 10
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with config_file.open("r") as f:
            raw = f.read()

        for key, value in os.environ.items():
            raw = raw.replace(f"${{{key}}}", value)

        data = yaml.safe_load(raw) or {}
        return cls(**data)

    def to_yaml(self, output_path: str) -> None:
        """Save configuration to YAML file."""
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with output_file.open("w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)
