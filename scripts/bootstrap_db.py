"""
Scripts - Bootstrap Database.

============================================================
RESPONSIBILITY
============================================================
Initializes the database for first-time setup.

- Creates the schema
- Seeds the default currency table
- Validates setup

============================================================
USAGE
============================================================
python -m scripts.bootstrap_db

Options:
  --no-seed          Skip seed data
  --validate-only    Only validate, don't create

============================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.config import AppConfig
from core.logging_setup import setup_logging
from database.engine import (
    DatabasePersistenceError,
    create_database_engine,
    get_db_session,
    initialize_database,
    verify_required_tables,
)
from database.seed import seed_currencies
from storage.repositories.exceptions import RepositoryException

logger = logging.getLogger("scripts.bootstrap_db")


def main(argv: Optional[List[str]] = None) -> int:
    """Bootstrap database entry point."""
    parser = argparse.ArgumentParser(description="Initialize the currency database")
    parser.add_argument("--no-seed", action="store_true", help="Skip seed data")
    parser.add_argument("--validate-only", action="store_true", help="Only validate, don't create")
    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    try:
        if args.validate_only:
            create_database_engine(config.database_url)
            status = verify_required_tables()
            return 0 if all(status.values()) else 1

        initialize_database(config.database_url)
        if not args.no_seed:
            with get_db_session() as session:
                seed_currencies(session)

    except (DatabasePersistenceError, RepositoryException) as e:
        logger.error(f"Bootstrap failed: {e}")
        return 1

    logger.info("Bootstrap complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
