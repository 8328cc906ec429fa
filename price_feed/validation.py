"""
Price Feed - Feed Validator.

A payload is usable only when it carries a "time" block and a
non-empty "bpi" mapping. Nothing from upstream is trusted before
passing this gate.

validate() is the check itself and raises ValidationError naming
the missing piece; the pipeline gates on it so the rejection reason
reaches the log. is_valid() is the boolean form of the same check.
"""

import logging
from typing import Any, Mapping

from price_feed.types import ValidationError

logger = logging.getLogger(__name__)


def validate(feed: Any, source: str = "feed_validator") -> None:
    """
    Check that a payload has the shape the pipeline needs.

    Raises:
        ValidationError: Naming the first missing piece
    """
    if feed is None:
        raise ValidationError("Feed is empty", source=source)

    if not isinstance(feed, Mapping):
        raise ValidationError(
            f"Feed must be a mapping, got {type(feed).__name__}",
            source=source,
        )

    if "time" not in feed:
        raise ValidationError("Feed has no 'time' block", source=source)

    bpi = feed.get("bpi")
    if not isinstance(bpi, Mapping):
        raise ValidationError("Feed has no 'bpi' mapping", source=source)

    if not bpi:
        raise ValidationError("Feed 'bpi' mapping is empty", source=source)


def is_valid(feed: Any) -> bool:
    """True iff the payload passes validate()."""
    try:
        validate(feed)
    except ValidationError as e:
        logger.debug(f"Feed rejected: {e}")
        return False
    return True
