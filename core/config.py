"""
Core Module - Application Configuration.

============================================================
RESPONSIBILITY
============================================================
Loads service configuration from the environment.

- Reads a local .env file when present
- Provides typed defaults for every setting
- Validates values before the service starts

============================================================
ENVIRONMENT VARIABLES
============================================================
DATABASE_URL                 sqlite:///./currency.db
PRICE_FEED_URL               CoinDesk current price endpoint
PRICE_FEED_CONNECT_TIMEOUT   5 (seconds)
PRICE_FEED_READ_TIMEOUT      5 (seconds)
SEED_CURRENCIES              true
LOG_LEVEL                    INFO
LOG_FORMAT                   text (json | text)
API_HOST                     0.0.0.0
API_PORT                     8080

============================================================
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

from core.exceptions import InvalidConfigError


DEFAULT_DATABASE_URL = "sqlite:///./currency.db"
DEFAULT_PRICE_FEED_URL = "https://api.coindesk.com/v1/bpi/currentprice.json"

LOG_FORMATS = ("json", "text")


def _env_float(key: str, default: str) -> float:
    raw = os.getenv(key, default)
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfigError(key, raw, "expected a number")


def _env_int(key: str, default: str) -> int:
    raw = os.getenv(key, default)
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfigError(key, raw, "expected an integer")


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AppConfig:
    """Configuration for the currency service."""

    # Persistence
    database_url: str = DEFAULT_DATABASE_URL
    """SQLAlchemy database URL."""

    seed_currencies: bool = True
    """Load the default currency table on startup."""

    # Upstream price feed
    price_feed_url: str = DEFAULT_PRICE_FEED_URL
    """Bitcoin price index endpoint."""

    connect_timeout_seconds: float = 5.0
    """Connect timeout for the upstream fetch."""

    read_timeout_seconds: float = 5.0
    """Read timeout for the upstream fetch."""

    # Logging
    log_level: str = "INFO"
    """Logging level."""

    log_format: str = "text"
    """Log output format (json or text)."""

    # HTTP server
    api_host: str = "0.0.0.0"
    """Bind address for uvicorn."""

    api_port: int = 8080
    """Bind port for uvicorn."""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables."""
        load_dotenv()
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            seed_currencies=_env_bool("SEED_CURRENCIES", "true"),
            price_feed_url=os.getenv("PRICE_FEED_URL", DEFAULT_PRICE_FEED_URL),
            connect_timeout_seconds=_env_float("PRICE_FEED_CONNECT_TIMEOUT", "5"),
            read_timeout_seconds=_env_float("PRICE_FEED_READ_TIMEOUT", "5"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text").lower(),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=_env_int("API_PORT", "8080"),
        )

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.database_url:
            errors.append("database_url must not be empty")

        if not self.price_feed_url.startswith(("http://", "https://")):
            errors.append("price_feed_url must be an http(s) URL")

        if self.connect_timeout_seconds <= 0:
            errors.append("connect_timeout_seconds must be positive")

        if self.read_timeout_seconds <= 0:
            errors.append("read_timeout_seconds must be positive")

        if self.log_format not in LOG_FORMATS:
            errors.append(f"log_format must be one of {', '.join(LOG_FORMATS)}")

        if not 0 < self.api_port < 65536:
            errors.append("api_port must be between 1 and 65535")

        return errors
