"""
Tests for the rate parser.
"""

import logging

import pytest

from price_feed.normalizers.rate_parser import parse_rate


class TestParseRate:
    """Locale-formatted rate strings."""

    def test_thousands_separator(self):
        assert parse_rate("57,231.4983") == 57231.4983

    def test_plain_number(self):
        assert parse_rate("1234.5") == 1234.5

    def test_integer_string(self):
        assert parse_rate("42") == 42.0

    def test_strips_currency_symbols_and_spaces(self):
        assert parse_rate(" $ 1,000.25 ") == 1000.25

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", ".", None])
    def test_unparsable_yields_zero(self, text):
        """Bad input reads as 0.0 and never raises."""
        assert parse_rate(text) == 0.0

    def test_unparsable_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="price_feed.normalizers.rate_parser"):
            parse_rate("abc", source="bpi.USD")

        assert "Cannot parse rate 'abc'" in caplog.text

    def test_negative_sign_is_dropped(self):
        """Only digits and decimal points survive cleaning."""
        assert parse_rate("-12.5") == 12.5

    def test_out_of_range_yields_zero(self, caplog):
        """A digit string past the float range reads as 0.0, not infinity."""
        with caplog.at_level(logging.WARNING, logger="price_feed.normalizers.rate_parser"):
            assert parse_rate("9" * 400, source="bpi.USD") == 0.0

        assert "Cannot parse rate" in caplog.text
