"""
Tests for the synthetic fallback feed.
"""

from datetime import datetime, timezone

from price_feed.synthetic import (
    SYNTHETIC_RATES,
    SyntheticFeedGenerator,
    format_rate,
    generate,
)
from price_feed.types import FeedSource
from price_feed.validation import is_valid


class TestFormatRate:

    def test_thousands_and_four_decimals(self):
        assert format_rate(57231.4983) == "57,231.4983"

    def test_pads_decimals(self):
        assert format_rate(1000) == "1,000.0000"


class TestSyntheticFeedGenerator:
    """Shape and content of the generated feed."""

    def test_passes_validator(self, mock_clock):
        feed = SyntheticFeedGenerator(mock_clock).generate()
        assert is_valid(feed.payload)

    def test_tagged_synthetic(self, mock_clock):
        feed = SyntheticFeedGenerator(mock_clock).generate()
        assert feed.source == FeedSource.SYNTHETIC
        assert feed.is_synthetic

    def test_contains_usd_gbp_eur(self, mock_clock):
        feed = SyntheticFeedGenerator(mock_clock).generate()
        assert {"USD", "GBP", "EUR"} <= set(feed.bpi)

    def test_rate_string_matches_float(self, mock_clock):
        feed = SyntheticFeedGenerator(mock_clock).generate()

        for code, _symbol, _description, rate in SYNTHETIC_RATES:
            entry = feed.bpi[code]
            assert entry["code"] == code
            assert entry["rate_float"] == rate
            assert entry["rate"] == format_rate(rate)

    def test_time_block_uses_clock(self, mock_clock):
        feed = SyntheticFeedGenerator(mock_clock).generate()

        assert feed.time["updated"] == "Mar 29, 2025 11:53:00 UTC"
        assert feed.time["updatedISO"] == "2025-03-29T11:53:00+00:00"
        assert feed.time["updateduk"] == "Mar 29, 2025 at 11:53 GMT"

    def test_microseconds_dropped(self, mock_clock):
        mock_clock.set_time(datetime(2025, 3, 29, 11, 53, 0, 987654, tzinfo=timezone.utc))
        feed = SyntheticFeedGenerator(mock_clock).generate()
        assert feed.time["updatedISO"] == "2025-03-29T11:53:00+00:00"

    def test_disclaimer_present(self, mock_clock):
        payload = generate(mock_clock).payload
        assert payload["chartName"] == "Bitcoin"
        assert "CoinDesk" in payload["disclaimer"]

    def test_each_call_builds_fresh_payload(self, mock_clock):
        generator = SyntheticFeedGenerator(mock_clock)
        first = generator.generate()
        first.payload["bpi"].clear()

        assert generator.generate().bpi
