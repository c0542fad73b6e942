"""
Office expense, staff salary and personal expense schemas.

Derived totals (monthly_total, gross_salary, net_salary) are computed by
the expense service and only appear on responses.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator

from backoffice.models.base import SalaryPaymentStatus
from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = [
    "OfficeExpenseCreate",
    "OfficeExpenseUpdate",
    "OfficeExpenseResponse",
    "StaffSalaryCreate",
    "StaffSalaryUpdate",
    "StaffSalaryResponse",
    "PersonalExpenseCreate",
    "PersonalExpenseUpdate",
    "PersonalExpenseResponse",
]

_NON_NEGATIVE = Decimal("0")


class OfficeExpenseCreate(BaseCreateSchema):
    location: str = Field(..., min_length=1, max_length=255)
    month: str = Field(..., min_length=1, max_length=20, description="Month label, e.g. 2024-03")
    expense_date: Date
    rent: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    utilities: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    internet: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    marketing: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    travel: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    miscellaneous: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("rent", "utilities", "internet", "marketing", "travel", "miscellaneous")
    @classmethod
    def quantize_lines(cls, v: Decimal) -> Decimal:
        """Quantize to 2 decimal places."""
        return v.quantize(Decimal("0.01"))


class OfficeExpenseUpdate(BaseUpdateSchema):
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    month: Optional[str] = Field(default=None, min_length=1, max_length=20)
    expense_date: Optional[Date] = None
    rent: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    utilities: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    internet: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    marketing: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    travel: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    miscellaneous: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    notes: Optional[str] = Field(default=None, max_length=500)


class OfficeExpenseResponse(BaseResponseSchema):
    location: str
    month: str
    expense_date: Date
    rent: Decimal
    utilities: Decimal
    internet: Decimal
    marketing: Decimal
    travel: Decimal
    miscellaneous: Decimal
    monthly_total: Decimal
    notes: Optional[str] = None


class StaffSalaryCreate(BaseCreateSchema):
    staff_name: str = Field(..., min_length=1, max_length=255)
    salary_month: Date = Field(..., description="Any day of the salary month; the first is conventional")
    basic_salary: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    allowances: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    deductions: Decimal = Field(default=Decimal("0.00"), ge=_NON_NEGATIVE)
    payment_status: SalaryPaymentStatus = SalaryPaymentStatus.PENDING
    payment_date: Optional[Date] = None
    payment_method: Optional[str] = Field(default=None, max_length=50)

    @model_validator(mode="after")
    def validate_deductions(self) -> "StaffSalaryCreate":
        if self.deductions > self.basic_salary + self.allowances:
            raise ValueError("deductions cannot exceed gross salary")
        return self


class StaffSalaryUpdate(BaseUpdateSchema):
    staff_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    salary_month: Optional[Date] = None
    basic_salary: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    allowances: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    deductions: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    payment_status: Optional[SalaryPaymentStatus] = None
    payment_date: Optional[Date] = None
    payment_method: Optional[str] = Field(default=None, max_length=50)


class StaffSalaryResponse(BaseResponseSchema):
    staff_name: str
    salary_month: Date
    basic_salary: Decimal
    allowances: Decimal
    deductions: Decimal
    gross_salary: Decimal
    net_salary: Decimal
    payment_status: SalaryPaymentStatus
    payment_date: Optional[Date] = None
    payment_method: Optional[str] = None


class PersonalExpenseCreate(BaseCreateSchema):
    description: str = Field(..., min_length=1, max_length=500)
    category: str = Field(default="general", max_length=100)
    amount: Decimal = Field(..., ge=_NON_NEGATIVE)
    expense_date: Date
    payment_mode: str = Field(default="cash", max_length=50)


class PersonalExpenseUpdate(BaseUpdateSchema):
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    category: Optional[str] = Field(default=None, max_length=100)
    amount: Optional[Decimal] = Field(default=None, ge=_NON_NEGATIVE)
    expense_date: Optional[Date] = None
    payment_mode: Optional[str] = Field(default=None, max_length=50)


class PersonalExpenseResponse(BaseResponseSchema):
    description: str
    category: str
    amount: Decimal
    expense_date: Date
    payment_mode: str
