"""
Currency Reference Service.

This service handles:
- Listing and looking up currencies
- Creating, updating and deleting currencies
- Committing each write as its own transaction
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from database.models import Currency
from storage.repositories.currency import CurrencyRepository

from .schemas import CurrencyCreate, CurrencyUpdate

logger = logging.getLogger(__name__)


class CurrencyService:
    """Service for managing currency reference data."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = CurrencyRepository(session)

    # ---------------------------------------------------------
    # READ
    # ---------------------------------------------------------

    def get_all_currencies(self) -> List[Currency]:
        return self.repository.get_all()

    def get_currency(self, currency_id: int) -> Optional[Currency]:
        return self.repository.get_by_id(currency_id)

    def get_currency_by_code(self, code: str) -> Optional[Currency]:
        return self.repository.get_by_code(code)

    # ---------------------------------------------------------
    # WRITE
    # ---------------------------------------------------------

    def create_currency(self, data: CurrencyCreate) -> Currency:
        """
        Create a currency.

        Raises:
            DuplicateRecordError: If the code is already taken
        """
        currency = self.repository.create(data.code, data.name)
        self.repository.commit()
        return currency

    def update_currency(self, currency_id: int, data: CurrencyUpdate) -> Currency:
        """
        Replace a currency's code and name.

        Raises:
            RecordNotFoundError: If the id does not exist
            DuplicateRecordError: If the new code is taken by another currency
        """
        currency = self.repository.update(currency_id, data.code, data.name)
        self.repository.commit()
        return currency

    def delete_currency(self, currency_id: int) -> None:
        """
        Delete a currency.

        Raises:
            RecordNotFoundError: If the id does not exist
        """
        self.repository.delete(currency_id)
        self.repository.commit()
