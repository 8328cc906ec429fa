"""
Pydantic Schemas for the Currency Reference API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from database.models import CODE_LENGTH, NAME_MAX_LENGTH


# =============================================================
# CURRENCY CRUD
# =============================================================

class CurrencyBase(BaseModel):
    code: str = Field(..., description="ISO 4217 style three-letter code")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Display name")

    @field_validator("code")
    @classmethod
    def validate_code(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != CODE_LENGTH or not value.isalpha() or not value.isascii():
            raise ValueError(f"code must be {CODE_LENGTH} letters")
        return value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class CurrencyCreate(CurrencyBase):
    """Body for creating a currency."""
    pass


class CurrencyUpdate(CurrencyBase):
    """Body for replacing a currency's code and name."""
    pass


class CurrencyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    created_at: datetime
    updated_at: datetime

