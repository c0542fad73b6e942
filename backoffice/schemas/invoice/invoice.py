"""
Invoice schemas.

An invoice is an arithmetic snapshot: items, discount and GST settings
go in, totals come out and are persisted unchanged.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from backoffice.models.base import DiscountType, InvoiceStatus
from backoffice.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "InvoiceItemInput",
    "InvoiceLineItem",
    "InvoiceRequest",
    "InvoiceTotals",
    "InvoiceResponse",
    "InvoiceStatusUpdate",
]


class InvoiceItemInput(BaseSchema):
    """
    Line item as entered.

    ``amount`` is the unit amount; when a fee type is given and amount is
    omitted, the fee type's catalog amount is used.
    """

    description: Optional[str] = Field(default=None, max_length=255)
    fee_type_id: Optional[UUID] = None
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0"))
    quantity: int = Field(default=1, ge=1)


class InvoiceLineItem(BaseSchema):
    """Line item as persisted on the invoice."""

    description: str
    quantity: int
    unit_price: Decimal
    amount: Decimal


class InvoiceRequest(BaseSchema):
    student_id: Optional[UUID] = None
    items: List[InvoiceItemInput] = Field(..., min_length=1)
    discount: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    discount_type: DiscountType = DiscountType.PERCENTAGE
    apply_gst: bool = True
    gst_percentage: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("100"))
    invoice_date: Optional[Date] = None
    due_date: Optional[Date] = None
    status: InvoiceStatus = InvoiceStatus.UNPAID
    terms: Optional[str] = Field(default=None, max_length=2000)
    created_by: Optional[str] = Field(default=None, max_length=255)

    @field_validator("discount")
    @classmethod
    def quantize_discount(cls, v: Decimal) -> Decimal:
        return v.quantize(Decimal("0.01"))

    @model_validator(mode="after")
    def validate_percentage_discount(self) -> "InvoiceRequest":
        if self.discount_type == DiscountType.PERCENTAGE and self.discount > 100:
            raise ValueError("Percentage discount cannot exceed 100")
        return self


class InvoiceTotals(BaseSchema):
    items: List[InvoiceLineItem]
    subtotal: Decimal
    discount_amount: Decimal
    gst_amount: Decimal
    total_amount: Decimal


class InvoiceResponse(BaseResponseSchema):
    invoice_number: str
    student_id: Optional[UUID] = None
    status: InvoiceStatus
    invoice_date: Date
    due_date: Optional[Date] = None
    items: List[InvoiceLineItem]
    discount_type: DiscountType
    discount: Decimal
    gst_percentage: Decimal
    subtotal: Decimal
    discount_amount: Decimal
    gst_amount: Decimal
    total_amount: Decimal
    terms: Optional[str] = None
    created_by: Optional[str] = None


class InvoiceStatusUpdate(BaseSchema):
    status: InvoiceStatus
