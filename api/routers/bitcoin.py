"""
Bitcoin price feed endpoints.

- /api/bitcoin/price/original: raw upstream (or synthetic) payload
- /api/bitcoin/price: normalized feed with display names
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_pipeline
from api.schemas import TransformedFeedResponse
from price_feed.pipeline import TransformPipeline

router = APIRouter(prefix="/api/bitcoin", tags=["Bitcoin Price"])


@router.get("/price/original")
def get_original_price(pipeline: TransformPipeline = Depends(get_pipeline)) -> Dict[str, Any]:
    """Raw price index payload, synthetic when the upstream is unavailable."""
    return pipeline.fetch_or_fallback().payload


@router.get("/price", response_model=TransformedFeedResponse)
def get_transformed_price(pipeline: TransformPipeline = Depends(get_pipeline)):
    """
    Transformed price feed.

    Format:
    {
      "updateTime": "2025/03/29 11:53:00",
      "currencies": {
        "USD": {"code": "USD", "displayName": "US Dollar", "rate": 57231.4983, "estimated": false},
        "JPY": {"code": "JPY", "displayName": "Japanese Yen", "rate": 515.08, "estimated": true}
      }
    }
    """
    return pipeline.transform().to_dict()
