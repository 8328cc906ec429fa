"""
Price Feed - CoinDesk Collector.

============================================================
RESPONSIBILITY
============================================================
Fetches the current Bitcoin price index from CoinDesk.

- Single blocking GET per call, no retries
- Bounded connect and read timeouts
- Every failure surfaces as FetchError

============================================================
DESIGN PRINCIPLES
============================================================
- Collection only, no validation or fallback here
- The pipeline decides what to do with a FetchError
- Transport is injectable for tests

============================================================
"""

import logging
from typing import Optional

import httpx

from price_feed.types import FeedSource, FetchError, PriceFeedConfig, RawFeed


class CoindeskCollector:
    """
    Collector for the CoinDesk Bitcoin Price Index.

    Instances are callable, so they plug straight into the
    pipeline as its fetch function.
    """

    def __init__(
        self,
        config: Optional[PriceFeedConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the collector.

        Args:
            config: Upstream URL and timeouts
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._config = config or PriceFeedConfig()
        self._transport = transport
        self._logger = logging.getLogger(f"collector.{self._config.source_name}")

    @property
    def source_name(self) -> str:
        return self._config.source_name

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self._config.read_timeout_seconds,
            connect=self._config.connect_timeout_seconds,
        )

    def fetch(self) -> RawFeed:
        """
        Fetch the raw price index.

        Returns:
            RawFeed tagged as upstream

        Raises:
            FetchError: On network, HTTP or decoding errors
        """
        self._logger.info(f"Fetching price index from {self._config.url}")
        try:
            with httpx.Client(timeout=self._timeout(), transport=self._transport) as client:
                response = client.get(self._config.url, headers={"Accept": "application/json"})
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            raise FetchError(
                message=f"HTTP {e.response.status_code}: {e.response.text[:200]}",
                source=self.source_name,
                recoverable=e.response.status_code >= 500,
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(
                message=f"Request timeout: {e}",
                source=self.source_name,
            ) from e
        except httpx.RequestError as e:
            raise FetchError(
                message=f"Request error: {e}",
                source=self.source_name,
            ) from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise FetchError(
                message=f"Invalid JSON body: {e}",
                source=self.source_name,
                recoverable=False,
            ) from e

        if not isinstance(data, dict):
            raise FetchError(
                message=f"Expected a JSON object, got {type(data).__name__}",
                source=self.source_name,
                recoverable=False,
            )

        return RawFeed(payload=data, source=FeedSource.UPSTREAM)

    def __call__(self) -> RawFeed:
        return self.fetch()
