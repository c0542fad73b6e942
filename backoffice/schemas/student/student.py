"""
Student schemas, including the per-student financial summary.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import EmailStr, Field

from backoffice.models.base import PaymentStatus, StudentStatus
from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "UpcomingPayment",
    "StudentFinancialSummary",
]


class StudentCreate(BaseCreateSchema):
    """
    Student admission.

    admission_number is generated when omitted.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    admission_number: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(default=None, max_length=20)
    status: StudentStatus = StudentStatus.ACTIVE
    university_id: UUID
    course_id: UUID
    academic_session_id: UUID
    agent_id: Optional[UUID] = None


class StudentUpdate(BaseUpdateSchema):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(default=None, max_length=20)
    status: Optional[StudentStatus] = None
    university_id: Optional[UUID] = None
    course_id: Optional[UUID] = None
    academic_session_id: Optional[UUID] = None
    agent_id: Optional[UUID] = None


class StudentResponse(BaseResponseSchema):
    first_name: str
    last_name: str
    admission_number: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    status: StudentStatus
    university_id: UUID
    course_id: UUID
    academic_session_id: UUID
    agent_id: Optional[UUID] = None


class UpcomingPayment(BaseSchema):
    payment_id: UUID
    fee_type: Optional[str] = None
    amount_due: Decimal
    amount_paid: Decimal
    balance: Decimal
    due_date: Optional[Date] = None
    payment_status: PaymentStatus


class StudentFinancialSummary(BaseSchema):
    """Totals across one student's ledger rows."""

    student_id: UUID
    student_name: str
    total_fees: Decimal = Field(..., description="Sum of amount_due")
    paid_amount: Decimal = Field(..., description="Sum of amount_paid")
    pending_amount: Decimal = Field(..., description="Sum of positive balances")
    next_payment_amount: Optional[Decimal] = None
    next_payment_date: Optional[Date] = None
    upcoming_payments: List[UpcomingPayment] = Field(default_factory=list)
