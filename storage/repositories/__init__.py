"""
Repository Layer Package.

============================================================
PURPOSE
============================================================
The Repository Layer is the ONLY gateway to persistent storage.
All database access goes through repository classes.

============================================================
ARCHITECTURE PRINCIPLES
============================================================
1. Session Injection: Sessions are injected, not created internally
2. Explicit Methods: clear method names per operation
3. Exception Handling: All DB errors wrapped in repository exceptions
4. Commit Ownership: repositories flush, callers commit

============================================================
"""

from storage.repositories.base import BaseRepository
from storage.repositories.currency import CurrencyRepository
from storage.repositories.exceptions import (
    ConnectionError,
    DuplicateRecordError,
    IntegrityError,
    QueryError,
    RecordNotFoundError,
    RepositoryException,
    TransactionError,
)

__all__ = [
    "BaseRepository",
    "CurrencyRepository",
    "ConnectionError",
    "DuplicateRecordError",
    "IntegrityError",
    "QueryError",
    "RecordNotFoundError",
    "RepositoryException",
    "TransactionError",
]
