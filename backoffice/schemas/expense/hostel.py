"""
Hostel and hostel expense schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from backoffice.models.base import ExpenseStatus, HostelStatus
from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = [
    "HostelCreate",
    "HostelUpdate",
    "HostelResponse",
    "HostelExpenseCreate",
    "HostelExpenseUpdate",
    "HostelExpenseResponse",
]


class HostelCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    university_id: Optional[UUID] = None
    capacity: int = Field(default=0, ge=0)
    monthly_rent: Decimal = Field(default=Decimal("0.00"), ge=Decimal("0"))
    status: HostelStatus = HostelStatus.ACTIVE
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)


class HostelUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    university_id: Optional[UUID] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    monthly_rent: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    status: Optional[HostelStatus] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)


class HostelResponse(BaseResponseSchema):
    name: str
    location: str
    university_id: Optional[UUID] = None
    capacity: int
    monthly_rent: Decimal
    status: HostelStatus
    email: Optional[str] = None
    phone: Optional[str] = None


class HostelExpenseCreate(BaseCreateSchema):
    hostel_id: UUID
    expense_type: str = Field(..., min_length=1, max_length=100)
    category: str = Field(default="general", max_length=100)
    amount: Decimal = Field(..., ge=Decimal("0"))
    expense_date: Date
    status: ExpenseStatus = ExpenseStatus.PENDING
    vendor_name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, v: Decimal) -> Decimal:
        return v.quantize(Decimal("0.01"))


class HostelExpenseUpdate(BaseUpdateSchema):
    expense_type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    category: Optional[str] = Field(default=None, max_length=100)
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    expense_date: Optional[Date] = None
    status: Optional[ExpenseStatus] = None
    vendor_name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=500)


class HostelExpenseResponse(BaseResponseSchema):
    hostel_id: UUID
    expense_type: str
    category: str
    amount: Decimal
    expense_date: Date
    status: ExpenseStatus
    vendor_name: Optional[str] = None
    description: Optional[str] = None
