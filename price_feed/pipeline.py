"""
Price Feed - Transform Pipeline.

============================================================
RESPONSIBILITY
============================================================
Turns one upstream fetch into the display feed.

1. Fetch the raw index, falling back to a synthetic feed
2. Normalize the update timestamp
3. Resolve each reported rate and its display name
4. Back-fill reference currencies with estimated rates
5. Assemble the TransformedFeed

============================================================
DESIGN PRINCIPLES
============================================================
- Fail-soft: every sub-failure degrades to a default value
- Fallback policy lives in fetch_or_fallback() only
- Read-only against the reference store
- No state shared between calls

============================================================
"""

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from core.clock import ClockProtocol, SystemClock
from price_feed.estimation import fill_missing
from price_feed.normalizers.rate_parser import parse_rate
from price_feed.normalizers.timestamp_normalizer import TimestampNormalizer
from price_feed.reference import ReferenceStore, missing_name
from price_feed.synthetic import SyntheticFeedGenerator
from price_feed.types import (
    CurrencyQuote,
    FetchError,
    RawFeed,
    TransformedFeed,
    ValidationError,
)
from price_feed.validation import validate

logger = logging.getLogger(__name__)

FetchFunction = Callable[[], Union[RawFeed, Mapping[str, Any]]]


class TransformPipeline:
    """
    Orchestrates fetch, fallback, normalization and enrichment.

    Args:
        fetcher: Zero-argument callable returning the upstream feed
        reference_store: Code -> display name lookup
        clock: Time source for fallbacks and synthetic feeds
    """

    def __init__(
        self,
        fetcher: FetchFunction,
        reference_store: ReferenceStore,
        clock: Optional[ClockProtocol] = None,
    ) -> None:
        clock = clock or SystemClock()
        self._fetcher = fetcher
        self._reference_store = reference_store
        self._generator = SyntheticFeedGenerator(clock)
        self._timestamps = TimestampNormalizer(clock)

    # =========================================================
    # FETCH - with fail-open fallback
    # =========================================================

    def fetch_or_fallback(self) -> RawFeed:
        """
        Fetch the upstream feed, substituting a synthetic one on failure.

        Never raises for upstream reasons.
        """
        try:
            result = self._fetcher()
        except FetchError as e:
            logger.warning(f"Price index fetch failed, using synthetic feed: {e}")
            return self._generator.generate()
        except Exception as e:
            error = FetchError(
                message=f"Unexpected error: {e}",
                source="pipeline",
                recoverable=False,
            )
            logger.error(f"{error}, using synthetic feed", exc_info=True)
            return self._generator.generate()

        feed = result if isinstance(result, RawFeed) else RawFeed(payload=result)

        try:
            validate(feed.payload)
        except ValidationError as e:
            logger.warning(f"Price index rejected, using synthetic feed: {e}")
            return self._generator.generate()

        return feed

    # =========================================================
    # TRANSFORM
    # =========================================================

    def transform(self) -> TransformedFeed:
        """Produce the display feed. Never raises for upstream reasons."""
        logger.info("Starting price feed transformation")
        feed = self.fetch_or_fallback()

        update_time = self._format_update_time(feed)

        currencies: Dict[str, CurrencyQuote] = {}
        for code, entry in feed.bpi.items():
            quote = CurrencyQuote(
                code=code,
                display_name=self._display_name(code),
                rate=self._resolve_rate(code, entry),
                estimated=False,
            )
            logger.debug(f"Processed {code}: {quote.display_name} at {quote.rate}")
            currencies[code] = quote

        currencies = fill_missing(currencies, self._reference_entries())

        estimated = sum(1 for quote in currencies.values() if quote.estimated)
        logger.info(
            f"Completed price feed transformation: source={feed.source.value} "
            f"reported={len(currencies) - estimated} estimated={estimated}"
        )
        return TransformedFeed(
            update_time=update_time,
            currencies=currencies,
            source=feed.source,
        )

    # =========================================================
    # HELPERS
    # =========================================================

    def _format_update_time(self, feed: RawFeed) -> str:
        time_block = feed.time
        return self._timestamps.normalize_first(
            time_block.get("updated"),
            time_block.get("updatedISO"),
        )

    @staticmethod
    def _resolve_rate(code: str, entry: Any) -> float:
        if not isinstance(entry, Mapping):
            logger.warning(f"Entry for {code} is not an object, using rate 0.0")
            return 0.0

        rate_float = entry.get("rate_float")
        if isinstance(rate_float, (int, float)) and not isinstance(rate_float, bool):
            try:
                value = float(rate_float)
            except (OverflowError, ValueError):
                value = None
            if value is not None and math.isfinite(value):
                return value
            logger.warning(f"rate_float for {code} is out of range, parsing rate string")

        return parse_rate(entry.get("rate"), source=f"bpi.{code}")

    def _display_name(self, code: str) -> str:
        try:
            name = self._reference_store.lookup(code)
        except Exception as e:
            logger.error(f"Reference lookup failed for {code}: {e}", exc_info=True)
            name = None
        return name or missing_name(code)

    def _reference_entries(self) -> List[Tuple[str, str]]:
        try:
            return list(self._reference_store.list_all())
        except Exception as e:
            logger.error(f"Reference listing failed, skipping estimates: {e}", exc_info=True)
            return []


__all__ = ["TransformPipeline", "FetchFunction"]
