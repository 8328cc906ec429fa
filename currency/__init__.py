"""
Currency Reference Package.

CRUD surface for the currency code -> display name table that the
price feed reads.
"""

from .schemas import CurrencyCreate, CurrencyResponse, CurrencyUpdate
from .service import CurrencyService

__all__ = [
    "CurrencyCreate",
    "CurrencyResponse",
    "CurrencyUpdate",
    "CurrencyService",
]
