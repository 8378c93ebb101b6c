"""Load API credentials from environment or config file.

Priority order:
1. Environment variables: BINANCE_API_KEY, BINANCE_API_SECRET_KEY
2. Config file: ~/.binance_config.json or custom path via ENV BINANCE_CONFIG_PATH

Both values are optional; public endpoints work without them and signed
calls fail with MissingCredentials at request time.
"""
import json
import os
from pathlib import Path
from typing import NamedTuple, Optional


class Credentials(NamedTuple):
    api_key: Optional[str] = None
    secret_key: Optional[str] = None


def load_credentials(config_path: Optional[str] = None) -> Credentials:
    """Load credentials from env, falling back to a JSON config file.

    Args:
        config_path: Optional override path to config file. If not provided,
                     checks BINANCE_CONFIG_PATH env var, then ~/.binance_config.json

    Raises:
        ValueError: If the config file exists but cannot be read
    """
    api_key = os.getenv("BINANCE_API_KEY")
    secret_key = os.getenv("BINANCE_API_SECRET_KEY")

    if api_key and secret_key:
        return Credentials(api_key=api_key, secret_key=secret_key)

    if config_path is None:
        config_path = os.getenv("BINANCE_CONFIG_PATH")
    if config_path is None:
        config_path = str(Path.home() / ".binance_config.json")

    config_file = Path(config_path)
    if config_file.exists():
        try:
            with config_file.open("r") as f:
                cfg = json.load(f)
        except (OSError, ValueError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
        api_key = api_key or cfg.get("api_key")
        secret_key = secret_key or cfg.get("secret_key")

    return Credentials(api_key=api_key or None, secret_key=secret_key or None)


def save_credentials(config_path: str, api_key: str, secret_key: str) -> None:
    """Write credentials to a JSON file readable by the owner only.

    WARNING: Stores secrets in plaintext.
    """
    cfg_file = Path(config_path)
    cfg_file.parent.mkdir(parents=True, exist_ok=True)

    with cfg_file.open("w") as f:
        json.dump({"api_key": api_key, "secret_key": secret_key}, f, indent=2)

    if os.name == "posix":
        cfg_file.chmod(0o600)
