"""
FastAPI Router for Currency Reference Endpoints.

Provides REST API for the currency table:
- List and look up currencies
- Create, update and delete currencies
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from storage.repositories.exceptions import DuplicateRecordError, RecordNotFoundError

from .schemas import CurrencyCreate, CurrencyResponse, CurrencyUpdate
from .service import CurrencyService

router = APIRouter(prefix="/api/currencies", tags=["Currencies"])


# =============================================================
# HELPER: Get service instance
# =============================================================

def get_currency_service(db: Session = Depends(get_db)) -> CurrencyService:
    return CurrencyService(db)


# =============================================================
# READ ENDPOINTS
# =============================================================

@router.get("", response_model=List[CurrencyResponse])
def list_currencies(service: CurrencyService = Depends(get_currency_service)):
    """Get all currencies ordered by id."""
    return [CurrencyResponse.model_validate(c) for c in service.get_all_currencies()]


@router.get("/code/{code}", response_model=CurrencyResponse)
def get_currency_by_code(
    code: str,
    service: CurrencyService = Depends(get_currency_service),
):
    """Get a currency by its code (case-insensitive)."""
    currency = service.get_currency_by_code(code)
    if not currency:
        raise HTTPException(status_code=404, detail=f"Currency {code.upper()} not found")
    return CurrencyResponse.model_validate(currency)


@router.get("/{currency_id}", response_model=CurrencyResponse)
def get_currency(
    currency_id: int,
    service: CurrencyService = Depends(get_currency_service),
):
    """Get a currency by id."""
    currency = service.get_currency(currency_id)
    if not currency:
        raise HTTPException(status_code=404, detail=f"Currency {currency_id} not found")
    return CurrencyResponse.model_validate(currency)


# =============================================================
# WRITE ENDPOINTS
# =============================================================

@router.post("", response_model=CurrencyResponse, status_code=status.HTTP_201_CREATED)
def create_currency(
    data: CurrencyCreate,
    service: CurrencyService = Depends(get_currency_service),
):
    """Create a currency. Codes are unique."""
    try:
        currency = service.create_currency(data)
    except DuplicateRecordError:
        raise HTTPException(status_code=409, detail=f"Currency {data.code} already exists")
    return CurrencyResponse.model_validate(currency)


@router.put("/{currency_id}", response_model=CurrencyResponse)
def update_currency(
    currency_id: int,
    data: CurrencyUpdate,
    service: CurrencyService = Depends(get_currency_service),
):
    """Replace a currency's code and name."""
    try:
        currency = service.update_currency(currency_id, data)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail=f"Currency {currency_id} not found")
    except DuplicateRecordError:
        raise HTTPException(status_code=409, detail=f"Currency {data.code} already exists")
    return CurrencyResponse.model_validate(currency)


@router.delete("/{currency_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_currency(
    currency_id: int,
    service: CurrencyService = Depends(get_currency_service),
):
    """Delete a currency."""
    try:
        service.delete_currency(currency_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail=f"Currency {currency_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
