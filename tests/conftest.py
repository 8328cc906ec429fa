"""
Shared fixtures for the currency service tests.

- Deterministic clock
- CoinDesk-shaped payloads
- In-memory SQLite sessions
- FastAPI TestClient with a stubbed upstream fetcher
"""

import copy
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_fetcher
from api.main import create_app
from core.clock import MockClock
from core.config import AppConfig
from database import models  # noqa: F401  registers tables on Base
from database.engine import Base, reset_engine
from price_feed.reference import InMemoryReferenceStore
from price_feed.types import FetchError


# =============================================================
# FIXTURES: Time
# =============================================================

FIXED_TIME = datetime(2025, 3, 29, 11, 53, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_clock():
    """Clock pinned to 2025-03-29 11:53:00 UTC."""
    return MockClock(FIXED_TIME)


# =============================================================
# FIXTURES: Payloads
# =============================================================

COINDESK_PAYLOAD = {
    "time": {
        "updated": "Mar 29, 2025 11:53:00 UTC",
        "updatedISO": "2025-03-29T11:53:00+00:00",
        "updateduk": "Mar 29, 2025 at 11:53 GMT",
    },
    "disclaimer": "This data was produced from the CoinDesk Bitcoin Price Index (USD).",
    "chartName": "Bitcoin",
    "bpi": {
        "USD": {
            "code": "USD",
            "symbol": "&#36;",
            "rate": "84,123.4567",
            "description": "United States Dollar",
            "rate_float": 84123.4567,
        },
        "GBP": {
            "code": "GBP",
            "symbol": "&pound;",
            "rate": "65,001.2500",
            "description": "British Pound Sterling",
            "rate_float": 65001.25,
        },
        "EUR": {
            "code": "EUR",
            "symbol": "&euro;",
            "rate": "77,500.0000",
            "description": "Euro",
            "rate_float": 77500.0,
        },
    },
}


@pytest.fixture
def coindesk_payload():
    """Fresh copy of a realistic upstream payload."""
    return copy.deepcopy(COINDESK_PAYLOAD)


@pytest.fixture
def usd_only_payload():
    """Upstream payload that reports USD at 50000.0 only."""
    return {
        "time": {"updated": "Mar 29, 2025 11:53:00 UTC"},
        "bpi": {
            "USD": {"code": "USD", "rate": "50,000.0000", "rate_float": 50000.0},
        },
    }


@pytest.fixture
def reference_store():
    """Reference store holding USD, JPY and CNY."""
    return InMemoryReferenceStore([
        ("USD", "US Dollar"),
        ("JPY", "Japanese Yen"),
        ("CNY", "Chinese Yuan"),
    ])


# =============================================================
# FIXTURES: Upstream stub
# =============================================================

class StubFetcher:
    """
    Fetch function double.

    Returns `result` on each call, or raises it when it is an
    exception. Counts calls.
    """

    def __init__(self, result=None):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if isinstance(self.result, BaseException):
            raise self.result
        return copy.deepcopy(self.result)


@pytest.fixture
def stub_fetcher(coindesk_payload):
    """Fetcher returning the realistic upstream payload."""
    return StubFetcher(coindesk_payload)


@pytest.fixture
def failing_fetcher():
    """Fetcher that always fails like a dropped connection."""
    return StubFetcher(FetchError("Request error: connection refused", source="stub"))


# =============================================================
# FIXTURES: Database
# =============================================================

@pytest.fixture
def db_session():
    """Session on a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    session = factory()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


# =============================================================
# FIXTURES: API
# =============================================================

@pytest.fixture
def app_config():
    return AppConfig(database_url="sqlite://", seed_currencies=True)


@pytest.fixture
def app(app_config, stub_fetcher):
    """Application wired to in-memory SQLite and the stub fetcher."""
    reset_engine()
    application = create_app(app_config)
    application.dependency_overrides[get_fetcher] = lambda: stub_fetcher
    yield application
    application.dependency_overrides.clear()
    reset_engine()


@pytest.fixture
def client(app):
    """TestClient with startup (database init and seeding) executed."""
    with TestClient(app) as test_client:
        yield test_client
