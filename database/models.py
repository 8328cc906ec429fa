"""
Database ORM Models.

Tables:
- currency: currency code -> display name reference data
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from .engine import Base


# =============================================================
# HELPER FUNCTIONS
# =============================================================

def utc_now() -> datetime:
    """Current UTC timestamp, naive, as stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


CODE_LENGTH = 3
NAME_MAX_LENGTH = 50


# =============================================================
# CURRENCY TABLE
# =============================================================

class Currency(Base):
    """
    Currency reference data.

    Read by the price feed pipeline for display names and the list
    of currencies to estimate. Written only through the CRUD API
    and the seed loader.
    """
    __tablename__ = "currency"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(CODE_LENGTH), nullable=False, unique=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<Currency(id={self.id}, code={self.code!r}, name={self.name!r})>"
