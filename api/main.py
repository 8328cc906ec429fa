"""
Currency Service - API.

============================================================
RESPONSIBILITY
============================================================
Builds the FastAPI application.

- Currency reference CRUD under /api/currencies
- Bitcoin price feed under /api/bitcoin
- Health endpoint
- Database initialization and seeding on startup

============================================================
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import bitcoin, health
from core.clock import SystemClock
from core.config import AppConfig
from currency.router import router as currency_router
from database.engine import initialize_database, transaction_scope
from database.seed import seed_currencies

logger = logging.getLogger(__name__)

SERVICE_NAME = "Currency Service API"
SERVICE_VERSION = "1.0.0"


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Service configuration (defaults to environment)
    """
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        initialize_database(config.database_url)
        if config.seed_currencies:
            with transaction_scope() as session:
                seed_currencies(session)
        logger.info(f"{SERVICE_NAME} started")
        yield
        logger.info(f"{SERVICE_NAME} stopped")

    app = FastAPI(
        title=SERVICE_NAME,
        description="Currency reference data and a normalized Bitcoin price feed",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.started_at = SystemClock().now()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(currency_router)
    app.include_router(bitcoin.router)

    @app.get("/", tags=["Root"])
    def root():
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "docs": "/docs",
        }

    return app
