"""
Price Feed Package.

Fetches the Bitcoin price index and normalizes it for display.

Modules:
- types: feed records, config and error taxonomy
- collectors: upstream fetchers
- normalizers: rate and timestamp parsing
- validation: structural feed check
- synthetic: fallback feed generator
- estimation: back-fill for unreported currencies
- reference: reference store protocol
- pipeline: the orchestrator
"""

from .pipeline import TransformPipeline
from .reference import InMemoryReferenceStore, ReferenceStore
from .types import (
    CurrencyQuote,
    FeedSource,
    FetchError,
    FormatError,
    ParseError,
    PriceFeedConfig,
    PriceFeedError,
    RawFeed,
    TransformedFeed,
    ValidationError,
)

__all__ = [
    "TransformPipeline",
    "InMemoryReferenceStore",
    "ReferenceStore",
    "CurrencyQuote",
    "FeedSource",
    "FetchError",
    "FormatError",
    "ParseError",
    "PriceFeedConfig",
    "PriceFeedError",
    "RawFeed",
    "TransformedFeed",
    "ValidationError",
]
