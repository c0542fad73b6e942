"""
Fee Type Model

Catalog of reusable named charges (e.g. "Tuition Fee") with a default
amount and billing frequency.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.models.base import BaseModel, FeeFrequency, Money, TimestampModel, UUIDMixin, enum_values

fee_frequency_type = Enum(FeeFrequency, name="fee_frequency_enum", values_callable=enum_values)


class FeeType(UUIDMixin, TimestampModel, BaseModel):
    """Fee catalog entry."""

    __tablename__ = "fee_types"

    name: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, default="general")
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    frequency: Mapped[FeeFrequency] = mapped_column(
        fee_frequency_type,
        nullable=False,
        default=FeeFrequency.ONE_TIME,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_fee_type_amount_positive"),
    )
