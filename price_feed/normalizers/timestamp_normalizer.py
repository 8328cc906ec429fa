"""
Price Feed - Timestamp Normalizer.

============================================================
RESPONSIBILITY
============================================================
Rewrites the upstream "updated" timestamps into the display
format yyyy/MM/dd HH:mm:ss.

- "Mar 29, 2025 11:53:00 UTC" -> "2025/03/29 11:53:00"
- "2025-03-29T11:53:00+00:00" -> "2025/03/29 11:53:00"
- Wall-clock values are kept, no timezone conversion
- Unparsable input falls back to the current local time

============================================================
"""

import logging
import re
from datetime import datetime
from typing import Optional

from core.clock import ClockProtocol, SystemClock
from price_feed.types import FormatError

logger = logging.getLogger(__name__)

DISPLAY_FORMAT = "%Y/%m/%d %H:%M:%S"

# Fixed table so parsing does not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_UPDATED_PATTERN = re.compile(
    r"^\s*(?P<month>[A-Za-z]{3})\s+(?P<day>\d{1,2}),\s*(?P<year>\d{4})\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\s+(?P<zone>[A-Za-z]{1,5}))?\s*$"
)


def parse_updated(text: str) -> datetime:
    """
    Parse the upstream human-readable timestamp.

    The trailing zone abbreviation is accepted and ignored.

    Raises:
        ValueError: If the text does not match the pattern
    """
    match = _UPDATED_PATTERN.match(text or "")
    if not match:
        raise ValueError(f"Unrecognized timestamp {text!r}")

    month_name = match.group("month").title()
    if month_name not in MONTH_ABBREVIATIONS:
        raise ValueError(f"Unknown month {month_name!r}")

    return datetime(
        year=int(match.group("year")),
        month=MONTH_ABBREVIATIONS.index(month_name) + 1,
        day=int(match.group("day")),
        hour=int(match.group("hour")),
        minute=int(match.group("minute")),
        second=int(match.group("second")),
    )


def parse_iso(text: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing Z."""
    if not text:
        raise ValueError("Empty ISO timestamp")
    return datetime.fromisoformat(text.strip().replace("Z", "+00:00"))


def format_updated(dt: datetime, zone: str = "UTC") -> str:
    """Format a datetime the way the upstream "updated" field reads."""
    month = MONTH_ABBREVIATIONS[dt.month - 1]
    return f"{month} {dt.day:02d}, {dt.year} {dt:%H:%M:%S} {zone}"


def format_updated_uk(dt: datetime, zone: str = "GMT") -> str:
    """Format a datetime the way the upstream "updateduk" field reads."""
    month = MONTH_ABBREVIATIONS[dt.month - 1]
    return f"{month} {dt.day:02d}, {dt.year} at {dt:%H:%M} {zone}"


class TimestampNormalizer:
    """Converts upstream timestamps to the display format."""

    def __init__(self, clock: Optional[ClockProtocol] = None) -> None:
        self._clock = clock or SystemClock()

    def normalize(self, updated_text: str) -> str:
        """Normalize the upstream "updated" field."""
        try:
            return parse_updated(updated_text).strftime(DISPLAY_FORMAT)
        except (ValueError, TypeError) as e:
            return self._fallback(updated_text, e)

    def normalize_iso(self, updated_iso: str) -> str:
        """Normalize the upstream "updatedISO" field."""
        try:
            return parse_iso(updated_iso).strftime(DISPLAY_FORMAT)
        except (ValueError, TypeError, AttributeError) as e:
            return self._fallback(updated_iso, e)

    def normalize_first(self, updated_text: Optional[str], updated_iso: Optional[str]) -> str:
        """
        Normalize "updated", else "updatedISO", else fall back to the clock.

        An unparsable "updated" does not hide a usable "updatedISO".
        """
        cause: Exception = ValueError("No timestamp in feed")
        if updated_text:
            try:
                return parse_updated(updated_text).strftime(DISPLAY_FORMAT)
            except (ValueError, TypeError) as e:
                cause = e
        if updated_iso:
            try:
                return parse_iso(updated_iso).strftime(DISPLAY_FORMAT)
            except (ValueError, TypeError, AttributeError) as e:
                cause = e
        return self._fallback(updated_text or updated_iso, cause)

    def now(self) -> str:
        """Current local time in the display format."""
        return self._clock.local_now().strftime(DISPLAY_FORMAT)

    def _fallback(self, text: object, cause: Exception) -> str:
        error = FormatError(
            message=f"Cannot format timestamp {text!r}: {cause}",
            source="timestamp_normalizer",
            details={"raw": text},
        )
        fallback = self.now()
        logger.warning(f"{error}, using current time {fallback}")
        return fallback


def normalize(updated_text: str, clock: Optional[ClockProtocol] = None) -> str:
    """Module-level shortcut for TimestampNormalizer(clock).normalize()."""
    return TimestampNormalizer(clock).normalize(updated_text)
