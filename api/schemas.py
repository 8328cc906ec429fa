"""
Pydantic schemas for the price feed and service endpoints.
"""

from typing import Dict

from pydantic import BaseModel, Field


# =======================
# PRICE FEED
# =======================

class CurrencyQuoteResponse(BaseModel):
    code: str
    displayName: str
    rate: float
    estimated: bool = False


class TransformedFeedResponse(BaseModel):
    updateTime: str = Field(..., description="yyyy/MM/dd HH:mm:ss")
    currencies: Dict[str, CurrencyQuoteResponse]


# =======================
# SERVICE
# =======================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str = "1.0.0"
    uptime_seconds: float = 0
