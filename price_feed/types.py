"""
Price Feed - Type Definitions.

============================================================
PURPOSE
============================================================
Shared types for the price feed layer.

- Upstream configuration
- Raw and transformed feed records
- Error taxonomy

============================================================
DESIGN PRINCIPLES
============================================================
- The raw payload is validated once, at the boundary
- Transformed records are immutable
- No business logic
- Serializable for the HTTP layer

============================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from core.config import AppConfig, DEFAULT_PRICE_FEED_URL


# =============================================================
# ENUMS
# =============================================================

class FeedSource(str, Enum):
    """Where a raw feed came from."""
    UPSTREAM = "upstream"
    SYNTHETIC = "synthetic"


# =============================================================
# CONFIGURATION TYPES
# =============================================================

@dataclass(frozen=True)
class PriceFeedConfig:
    """Configuration for the upstream price index."""
    url: str = DEFAULT_PRICE_FEED_URL
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 5.0
    source_name: str = "coindesk"

    @classmethod
    def from_app_config(cls, config: AppConfig) -> "PriceFeedConfig":
        return cls(
            url=config.price_feed_url,
            connect_timeout_seconds=config.connect_timeout_seconds,
            read_timeout_seconds=config.read_timeout_seconds,
        )


# =============================================================
# FEED RECORDS
# =============================================================

@dataclass(frozen=True)
class RawFeed:
    """
    Raw price index payload, fetched or synthesized.

    The payload keeps the upstream shape: a "time" block with
    updated/updatedISO/updateduk strings and a "bpi" mapping of
    currency code to rate entry.
    """
    payload: Dict[str, Any]
    source: FeedSource = FeedSource.UPSTREAM

    @property
    def time(self) -> Dict[str, Any]:
        block = self.payload.get("time")
        return block if isinstance(block, dict) else {}

    @property
    def bpi(self) -> Dict[str, Any]:
        block = self.payload.get("bpi")
        return block if isinstance(block, dict) else {}

    @property
    def is_synthetic(self) -> bool:
        return self.source == FeedSource.SYNTHETIC


@dataclass(frozen=True)
class CurrencyQuote:
    """One currency in the transformed feed."""
    code: str
    display_name: str
    rate: float
    estimated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "displayName": self.display_name,
            "rate": self.rate,
            "estimated": self.estimated,
        }


@dataclass(frozen=True)
class TransformedFeed:
    """Normalized price feed returned to callers."""
    update_time: str
    currencies: Dict[str, CurrencyQuote] = field(default_factory=dict)
    source: FeedSource = FeedSource.UPSTREAM

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API."""
        return {
            "updateTime": self.update_time,
            "currencies": {
                code: quote.to_dict() for code, quote in self.currencies.items()
            },
        }


# =============================================================
# ERROR TYPES
# =============================================================

class PriceFeedError(Exception):
    """Base exception for price feed errors."""

    def __init__(
        self,
        message: str,
        source: str,
        recoverable: bool = True,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.source = source
        self.recoverable = recoverable
        self.details = details or {}


class FetchError(PriceFeedError):
    """Error reaching the upstream price index."""
    pass


class ValidationError(PriceFeedError):
    """Payload is structurally incomplete."""
    pass


class ParseError(PriceFeedError):
    """Rate string could not be parsed."""
    pass


class FormatError(PriceFeedError):
    """Timestamp could not be parsed."""
    pass
