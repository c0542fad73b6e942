"""
Fee type (catalog) schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from backoffice.models.base import FeeFrequency
from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = ["FeeTypeCreate", "FeeTypeUpdate", "FeeTypeResponse"]


class FeeTypeCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=150, description="Fee name, e.g. Tuition Fee")
    category: str = Field(default="general", max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    amount: Decimal = Field(default=Decimal("0.00"), ge=Decimal("0"))
    frequency: FeeFrequency = FeeFrequency.ONE_TIME
    is_active: bool = True

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, v: Decimal) -> Decimal:
        """Quantize to 2 decimal places."""
        return v.quantize(Decimal("0.01"))


class FeeTypeUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    category: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    frequency: Optional[FeeFrequency] = None
    is_active: Optional[bool] = None


class FeeTypeResponse(BaseResponseSchema):
    name: str
    category: str
    description: Optional[str] = None
    amount: Decimal
    frequency: FeeFrequency
    is_active: bool
