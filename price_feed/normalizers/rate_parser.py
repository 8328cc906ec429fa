"""
Price Feed - Rate Parser.

Converts locale-formatted rate strings such as "57,231.4983"
to floats. Unparsable or out-of-range input is logged and read as 0.0.
"""

import logging
import math
import re
from typing import Optional

from price_feed.types import ParseError

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_rate(text: Optional[str], source: str = "rate_parser") -> float:
    """
    Parse a rate string, keeping only digits and decimal points.

    Args:
        text: Raw rate string, e.g. "57,231.4983"
        source: Name reported with a ParseError

    Returns:
        The parsed rate, or 0.0 if the cleaned string is not a finite number
    """
    cleaned = _NON_NUMERIC.sub("", "" if text is None else str(text))
    try:
        value = float(cleaned)
        if not math.isfinite(value):
            raise ValueError("rate out of range")
        return value
    except ValueError:
        error = ParseError(
            message=f"Cannot parse rate {text!r} (cleaned: {cleaned!r})",
            source=source,
            details={"raw": text, "cleaned": cleaned},
        )
        logger.warning(f"{error}, using 0.0")
        return 0.0
