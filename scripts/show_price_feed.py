"""
Show the transformed Bitcoin price feed without starting the API.

Uses the default currency table as the reference store, so no
database is needed.

Usage:
    python -m scripts.show_price_feed
    python -m scripts.show_price_feed --raw
"""

import argparse
import json
import sys
from typing import List, Optional

from core.config import AppConfig
from core.logging_setup import setup_logging
from database.seed import DEFAULT_CURRENCIES
from price_feed import InMemoryReferenceStore, PriceFeedConfig, TransformPipeline
from price_feed.collectors import CoindeskCollector


def print_banner(text: str) -> None:
    """Print a banner."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the Bitcoin price feed")
    parser.add_argument("--raw", action="store_true", help="Print the raw payload instead")
    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    pipeline = TransformPipeline(
        fetcher=CoindeskCollector(PriceFeedConfig.from_app_config(config)),
        reference_store=InMemoryReferenceStore(DEFAULT_CURRENCIES),
    )

    if args.raw:
        feed = pipeline.fetch_or_fallback()
        print_banner(f"RAW FEED ({feed.source.value})")
        print(json.dumps(feed.payload, indent=2, ensure_ascii=False))
        return 0

    transformed = pipeline.transform()
    print_banner(f"TRANSFORMED FEED ({transformed.source.value}) @ {transformed.update_time}")
    for quote in transformed.currencies.values():
        flag = "estimated" if quote.estimated else "reported"
        print(f"  {quote.code} | {quote.display_name:<24} | {quote.rate:>14,.4f} | {flag}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
