"""
Database Package Initialization.

Engine, session management and ORM models for the currency
reference store.
"""

from .engine import (
    Base,
    create_database_engine,
    get_engine,
    get_session,
    get_db_session,
    transaction_scope,
    reset_engine,
    initialize_database,
    create_all_tables,
    verify_database_connection,
    verify_required_tables,
    REQUIRED_TABLES,
    DatabasePersistenceError,
    DatabaseConnectionError,
    DatabaseInitializationError,
)
from .models import Currency

__all__ = [
    "Base",
    "create_database_engine",
    "get_engine",
    "get_session",
    "get_db_session",
    "transaction_scope",
    "reset_engine",
    "initialize_database",
    "create_all_tables",
    "verify_database_connection",
    "verify_required_tables",
    "REQUIRED_TABLES",
    "DatabasePersistenceError",
    "DatabaseConnectionError",
    "DatabaseInitializationError",
    "Currency",
]
