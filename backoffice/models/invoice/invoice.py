"""
Invoice Model

Immutable arithmetic snapshot: totals are computed once at creation and
are never recomputed from the fee catalog.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import JSON, Date as SQLDate, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import (
    BaseModel,
    DiscountType,
    InvoiceStatus,
    Money,
    TimestampModel,
    UUIDMixin,
    enum_values,
)


class Invoice(UUIDMixin, TimestampModel, BaseModel):
    """Persisted invoice with its line items stored as JSON."""

    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    student_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[InvoiceStatus] = mapped_column(
        Enum(InvoiceStatus, name="invoice_status_enum", values_callable=enum_values),
        nullable=False,
        default=InvoiceStatus.UNPAID,
    )
    invoice_date: Mapped[Date] = mapped_column(SQLDate, nullable=False)
    due_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)

    items: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    discount_type: Mapped[DiscountType] = mapped_column(
        Enum(DiscountType, name="discount_type_enum", values_callable=enum_values),
        nullable=False,
        default=DiscountType.PERCENTAGE,
    )
    discount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    gst_percentage: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))

    subtotal: Mapped[Decimal] = mapped_column(Money, nullable=False)
    discount_amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    gst_amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    total_amount: Mapped[Decimal] = mapped_column(Money, nullable=False)

    terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    student = relationship("Student", lazy="select")
