"""
Tests for the CoinDesk collector.

HTTP is served by httpx.MockTransport, no network access.
"""

import httpx
import pytest

from price_feed.collectors.coindesk import CoindeskCollector
from price_feed.types import FeedSource, FetchError, PriceFeedConfig


FEED_URL = "https://prices.example.test/v1/bpi/currentprice.json"


# =============================================================
# FIXTURES
# =============================================================

@pytest.fixture
def config():
    return PriceFeedConfig(url=FEED_URL, connect_timeout_seconds=1.0, read_timeout_seconds=2.0)


def make_collector(config, handler):
    return CoindeskCollector(config, transport=httpx.MockTransport(handler))


# =============================================================
# TEST: Success
# =============================================================

class TestFetchSuccess:

    def test_returns_upstream_feed(self, config, coindesk_payload):
        collector = make_collector(config, lambda request: httpx.Response(200, json=coindesk_payload))

        feed = collector.fetch()

        assert feed.source == FeedSource.UPSTREAM
        assert feed.payload == coindesk_payload

    def test_requests_configured_url(self, config, coindesk_payload):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=coindesk_payload)

        make_collector(config, handler).fetch()

        assert len(seen) == 1
        assert str(seen[0].url) == FEED_URL
        assert seen[0].method == "GET"
        assert seen[0].headers["accept"] == "application/json"

    def test_callable_as_fetch_function(self, config, coindesk_payload):
        collector = make_collector(config, lambda request: httpx.Response(200, json=coindesk_payload))
        assert collector().bpi["USD"]["rate_float"] == 84123.4567

    def test_timeouts_from_config(self, config):
        timeout = CoindeskCollector(config)._timeout()
        assert timeout.connect == 1.0
        assert timeout.read == 2.0

    def test_default_config(self):
        assert CoindeskCollector().source_name == "coindesk"


# =============================================================
# TEST: Failures
# =============================================================

class TestFetchFailures:
    """Every failure surfaces as FetchError."""

    def test_server_error_is_recoverable(self, config):
        collector = make_collector(config, lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(FetchError) as exc_info:
            collector.fetch()

        assert exc_info.value.recoverable is True
        assert exc_info.value.details["status_code"] == 503
        assert exc_info.value.source == "coindesk"

    def test_client_error_not_recoverable(self, config):
        collector = make_collector(config, lambda request: httpx.Response(404, text="gone"))

        with pytest.raises(FetchError) as exc_info:
            collector.fetch()

        assert exc_info.value.recoverable is False

    def test_connect_error(self, config):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError, match="Request error"):
            make_collector(config, handler).fetch()

    def test_timeout(self, config):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchError, match="Request timeout"):
            make_collector(config, handler).fetch()

    def test_invalid_json(self, config):
        collector = make_collector(config, lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(FetchError, match="Invalid JSON"):
            collector.fetch()

    def test_non_object_json(self, config):
        collector = make_collector(config, lambda request: httpx.Response(200, json=[1, 2, 3]))

        with pytest.raises(FetchError, match="Expected a JSON object"):
            collector.fetch()
