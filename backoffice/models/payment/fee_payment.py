"""
Fee Payment Model

The fee ledger row: one per (student, fee structure component) pair,
tracking the amount due, the cumulative amount paid and the derived
payment status.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, Date as SQLDate, Enum, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import (
    BaseModel,
    Money,
    PaymentStatus,
    TimestampModel,
    UUIDMixin,
    enum_values,
)


class FeePayment(UUIDMixin, TimestampModel, BaseModel):
    """
    Fee ledger row.

    payment_status must always agree with amount_due/amount_paid; the
    ledger service is the only writer of those three columns. The version
    column is the mapper's version counter, so two sessions flushing the
    same row from the same starting version cannot both succeed.
    """

    __tablename__ = "fee_payments"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fee_structure_component_id: Mapped[UUID] = mapped_column(
        ForeignKey("fee_structure_components.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amount_due: Mapped[Decimal] = mapped_column(Money, nullable=False)
    amount_paid: Mapped[Decimal] = mapped_column(
        Money,
        nullable=False,
        default=Decimal("0.00"),
    )
    due_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True, index=True)
    last_payment_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True, index=True)
    payment_status: Mapped[PaymentStatus] = mapped_column(
        Enum(PaymentStatus, name="fee_payment_status_enum", values_callable=enum_values),
        nullable=False,
        default=PaymentStatus.PENDING,
        index=True,
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Row version for optimistic locking",
    )

    student = relationship("Student", back_populates="fee_payments", lazy="select")
    component = relationship("FeeStructureComponent", lazy="joined")

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("amount_due >= 0", name="ck_fee_payment_amount_due_positive"),
        CheckConstraint("amount_paid >= 0", name="ck_fee_payment_amount_paid_positive"),
        Index("ix_fee_payment_student_component", "student_id", "fee_structure_component_id"),
    )

    @property
    def balance(self) -> Decimal:
        return (self.amount_due or Decimal("0")) - (self.amount_paid or Decimal("0"))
