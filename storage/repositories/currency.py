"""
Currency Repository.

============================================================
PURPOSE
============================================================
Data access for the currency reference table.

- CRUD used by the currency API and the seed loader
- lookup()/list_all() satisfy the price feed ReferenceStore

Codes are stored and matched uppercase.

============================================================
"""

from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from database.models import Currency
from storage.repositories.base import BaseRepository
from storage.repositories.exceptions import DuplicateRecordError


def normalize_code(code: str) -> str:
    return code.strip().upper()


class CurrencyRepository(BaseRepository[Currency]):
    """Repository for Currency rows."""

    unique_field = "code"

    def __init__(self, session: Session) -> None:
        super().__init__(session, Currency, "CurrencyRepository")

    # =========================================================
    # READ
    # =========================================================

    def get_all(self) -> List[Currency]:
        """All currencies ordered by id."""
        return self._execute_query(select(Currency).order_by(Currency.id))

    def get_by_id(self, currency_id: int) -> Optional[Currency]:
        return self._get_by_id(currency_id)

    def get_by_id_or_raise(self, currency_id: int) -> Currency:
        return self._get_by_id_or_raise(currency_id)

    def get_by_code(self, code: str) -> Optional[Currency]:
        stmt = select(Currency).where(Currency.code == normalize_code(code))
        return self._execute_scalar(stmt)

    def count(self) -> int:
        return self._count()

    # =========================================================
    # WRITE
    # =========================================================

    def create(self, code: str, name: str) -> Currency:
        """
        Insert a currency.

        Raises:
            DuplicateRecordError: If the code already exists
        """
        code = normalize_code(code)
        if self.get_by_code(code) is not None:
            raise DuplicateRecordError(
                repository_name=self._repository_name,
                constraint_field="code",
                value=code,
            )

        currency = self._add(Currency(code=code, name=name), {"code": code})
        self._logger.info(f"Created currency: id={currency.id} code={code}")
        return currency

    def update(self, currency_id: int, code: str, name: str) -> Currency:
        """
        Replace code and name of an existing currency.

        Raises:
            RecordNotFoundError: If the id does not exist
            DuplicateRecordError: If the new code belongs to another row
        """
        currency = self._get_by_id_or_raise(currency_id)
        code = normalize_code(code)

        other = self.get_by_code(code)
        if other is not None and other.id != currency.id:
            raise DuplicateRecordError(
                repository_name=self._repository_name,
                constraint_field="code",
                value=code,
                operation="update",
            )

        currency.code = code
        currency.name = name
        self._flush("update", {"code": code})
        self._logger.info(f"Updated currency: id={currency.id} code={code}")
        return currency

    def delete(self, currency_id: int) -> None:
        """
        Delete a currency.

        Raises:
            RecordNotFoundError: If the id does not exist
        """
        currency = self._get_by_id_or_raise(currency_id)
        self._delete(currency)
        self._logger.info(f"Deleted currency: id={currency_id} code={currency.code}")

    # =========================================================
    # REFERENCE STORE
    # =========================================================

    def lookup(self, code: str) -> Optional[str]:
        """Display name for a code, or None."""
        currency = self.get_by_code(code)
        return currency.name if currency else None

    def list_all(self) -> List[Tuple[str, str]]:
        """All (code, name) pairs ordered by id."""
        return [(currency.code, currency.name) for currency in self.get_all()]
