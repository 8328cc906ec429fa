"""
Price Feed - Estimation Engine.

============================================================
RESPONSIBILITY
============================================================
Back-fills currencies that the reference store knows about but
the upstream feed did not report.

- rate = USD rate * fixed USD-relative ratio
- Unknown codes use DEFAULT_RATIO
- Every synthesized quote is flagged estimated=True

These are rough approximations, not market data.

============================================================
"""

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

from price_feed.reference import missing_name
from price_feed.types import CurrencyQuote

logger = logging.getLogger(__name__)

USD_RELATIVE_RATIOS: Dict[str, float] = {
    "JPY": 0.009,
    "CNY": 0.155,
    "HKD": 0.128,
    "TWD": 0.036,
    "AUD": 0.75,
    "CAD": 0.80,
    "SGD": 0.74,
    "CHF": 1.09,
}

DEFAULT_RATIO = 0.5
DEFAULT_USD_RATE = 50000.0


def ratio(code: str) -> float:
    """USD-relative multiplier for a currency code."""
    return USD_RELATIVE_RATIOS.get(code.upper(), DEFAULT_RATIO)


def resolve_usd_rate(currencies: Mapping[str, CurrencyQuote]) -> float:
    """USD rate from the reported quotes, or DEFAULT_USD_RATE."""
    usd = currencies.get("USD")
    if usd is None:
        return DEFAULT_USD_RATE
    return usd.rate


def fill_missing(
    currencies: Mapping[str, CurrencyQuote],
    reference_entries: Iterable[Tuple[str, str]],
    usd_rate: Optional[float] = None,
) -> Dict[str, CurrencyQuote]:
    """
    Add estimated quotes for reference codes absent from the feed.

    Args:
        currencies: Quotes already produced from the feed
        reference_entries: (code, display name) pairs from the reference store
        usd_rate: Base rate; taken from the USD quote when omitted

    Returns:
        New mapping, reported quotes first, estimated quotes after
    """
    if usd_rate is None:
        usd_rate = resolve_usd_rate(currencies)

    result = dict(currencies)
    for code, name in reference_entries:
        if code in result:
            continue
        estimate = CurrencyQuote(
            code=code,
            display_name=name or missing_name(code),
            rate=usd_rate * ratio(code),
            estimated=True,
        )
        result[code] = estimate
        logger.debug(f"Estimated {code} at {estimate.rate} from USD rate {usd_rate}")

    return result
