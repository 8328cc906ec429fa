"""
Database Seed Data.

Default currency reference rows loaded at startup. Idempotent:
codes already present are left untouched.
"""

import logging
from typing import Iterable, Tuple

from sqlalchemy.orm import Session

from storage.repositories.currency import CurrencyRepository

logger = logging.getLogger(__name__)

DEFAULT_CURRENCIES: Tuple[Tuple[str, str], ...] = (
    ("USD", "US Dollar"),
    ("EUR", "Euro"),
    ("JPY", "Japanese Yen"),
    ("GBP", "British Pound"),
    ("CNY", "Chinese Yuan"),
    ("HKD", "Hong Kong Dollar"),
    ("AUD", "Australian Dollar"),
    ("CAD", "Canadian Dollar"),
    ("SGD", "Singapore Dollar"),
    ("CHF", "Swiss Franc"),
)


def seed_currencies(
    session: Session,
    currencies: Iterable[Tuple[str, str]] = DEFAULT_CURRENCIES,
) -> int:
    """
    Insert missing currencies and commit.

    Returns:
        Number of rows inserted
    """
    repository = CurrencyRepository(session)
    inserted = 0

    logger.info("Initializing currency data...")
    for code, name in currencies:
        if repository.get_by_code(code) is not None:
            continue
        repository.create(code, name)
        inserted += 1

    repository.commit()
    logger.info(f"Currency data initialization completed: {inserted} inserted")
    return inserted
