"""
Fee assignment and customization schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from backoffice.models.base import PaymentStatus
from backoffice.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "StudentSelection",
    "FeeAssignmentRequest",
    "FeeAssignmentResult",
    "CustomAmountRequest",
    "CustomizationResponse",
    "OneTimeChargeEntry",
]


class StudentSelection(BaseSchema):
    """
    Student filter for fee assignment.

    All given filters are combined; ``academic_session_id`` is the batch.
    """

    student_ids: Optional[List[UUID]] = None
    course_id: Optional[UUID] = None
    academic_session_id: Optional[UUID] = None
    university_id: Optional[UUID] = None
    name: Optional[str] = Field(default=None, max_length=200)

    def is_empty(self) -> bool:
        return (
            self.student_ids is None
            and not self.course_id
            and not self.academic_session_id
            and not self.university_id
            and not self.name
        )


class FeeAssignmentRequest(BaseSchema):
    fee_structure_id: UUID
    selection: StudentSelection = Field(default_factory=StudentSelection)
    due_date: Optional[Date] = None


class FeeAssignmentResult(BaseSchema):
    fee_structure_id: UUID
    student_count: int = Field(..., ge=0)
    created_count: int = Field(..., ge=0, description="Ledger rows created")
    skipped_count: int = Field(default=0, ge=0, description="Pairs left untouched because they already existed")


class CustomAmountRequest(BaseSchema):
    """Negative amounts are rejected by the ledger service."""

    student_id: UUID
    fee_structure_component_id: UUID
    custom_amount: Decimal
    reason: Optional[str] = Field(default=None, max_length=500)
    created_by: Optional[str] = Field(default=None, max_length=100)


class CustomizationResponse(BaseResponseSchema):
    student_id: UUID
    fee_structure_component_id: UUID
    custom_amount: Decimal
    reason: Optional[str] = None
    created_by: Optional[str] = None


class OneTimeChargeEntry(BaseSchema):
    """A student's ledger row for a one-time component with its override, if any."""

    payment_id: UUID
    student_id: UUID
    student_name: str
    admission_number: Optional[str] = None
    fee_structure_component_id: UUID
    fee_type: Optional[str] = None
    standard_amount: Decimal
    custom_amount: Optional[Decimal] = None
    amount_due: Decimal
    amount_paid: Decimal
    payment_status: PaymentStatus
