"""
Fee structure and component schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field, computed_field, field_validator

from backoffice.models.base import FeeFrequency
from backoffice.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)
from backoffice.schemas.fee_structure.fee_type import FeeTypeResponse

__all__ = [
    "FeeStructureComponentCreate",
    "FeeStructureComponentUpdate",
    "FeeStructureComponentResponse",
    "FeeStructureCreate",
    "FeeStructureUpdate",
    "FeeStructureResponse",
]


class FeeStructureComponentCreate(BaseCreateSchema):
    """
    One line of a fee structure.

    amount overrides the fee type's catalog amount; when omitted the
    catalog amount is copied.
    """

    fee_type_id: UUID
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    frequency: Optional[FeeFrequency] = None

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None:
            v = v.quantize(Decimal("0.01"))
        return v


class FeeStructureComponentUpdate(BaseUpdateSchema):
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    frequency: Optional[FeeFrequency] = None


class FeeStructureComponentResponse(BaseResponseSchema):
    fee_structure_id: UUID
    fee_type_id: UUID
    amount: Decimal
    frequency: FeeFrequency
    fee_type: Optional[FeeTypeResponse] = None


class FeeStructureCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    university_id: UUID
    course_id: UUID
    is_active: bool = True
    components: List[FeeStructureComponentCreate] = Field(default_factory=list)


class FeeStructureUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    is_active: Optional[bool] = None


class FeeStructureResponse(BaseResponseSchema):
    name: str
    university_id: UUID
    course_id: UUID
    is_active: bool
    components: List[FeeStructureComponentResponse] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def total_amount(self) -> Decimal:
        return sum((c.amount for c in self.components), Decimal("0.00"))
