"""
FastAPI dependencies shared by the routers.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import AppConfig
from database.engine import get_session
from price_feed.collectors.coindesk import CoindeskCollector
from price_feed.pipeline import FetchFunction, TransformPipeline
from price_feed.types import PriceFeedConfig
from storage.repositories.currency import CurrencyRepository


# =============================================================
# HELPER: Database dependency
# =============================================================

def get_db() -> Generator[Session, None, None]:
    db = get_session()
    try:
        yield db
    finally:
        db.close()


# =============================================================
# HELPER: Price feed wiring
# =============================================================

def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_fetcher(config: AppConfig = Depends(get_app_config)) -> FetchFunction:
    return CoindeskCollector(PriceFeedConfig.from_app_config(config))


def get_pipeline(
    fetcher: FetchFunction = Depends(get_fetcher),
    db: Session = Depends(get_db),
) -> TransformPipeline:
    return TransformPipeline(fetcher=fetcher, reference_store=CurrencyRepository(db))
