"""
Price Feed - Normalizers Package.

Normalizers turn upstream strings into typed values.

Normalizers:
- rate_parser: locale-formatted rate strings to floats
- timestamp_normalizer: upstream timestamps to yyyy/MM/dd HH:mm:ss
"""

from .rate_parser import parse_rate
from .timestamp_normalizer import (
    DISPLAY_FORMAT,
    TimestampNormalizer,
    format_updated,
    format_updated_uk,
    normalize,
)

__all__ = [
    "parse_rate",
    "DISPLAY_FORMAT",
    "TimestampNormalizer",
    "format_updated",
    "format_updated_uk",
    "normalize",
]
