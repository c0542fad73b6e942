"""
Fee ledger schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, computed_field

from backoffice.models.base import PaymentStatus
from backoffice.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = ["PaymentUpdateRequest", "FeePaymentResponse"]


class PaymentUpdateRequest(BaseSchema):
    """
    New cumulative amount paid for a ledger row.

    The caller supplies the running total, not an increment. Passing
    expected_version turns a concurrent modification into a conflict.
    """

    amount_paid: Decimal
    expected_version: Optional[int] = Field(default=None, ge=1)


class FeePaymentResponse(BaseResponseSchema):
    student_id: UUID
    fee_structure_component_id: UUID
    amount_due: Decimal
    amount_paid: Decimal
    due_date: Optional[Date] = None
    last_payment_date: Optional[Date] = None
    payment_status: PaymentStatus
    version: int

    @computed_field  # type: ignore[misc]
    @property
    def balance(self) -> Decimal:
        return self.amount_due - self.amount_paid
