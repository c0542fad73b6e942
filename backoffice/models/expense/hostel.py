"""
Hostel and hostel expense models.
"""

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, Date as SQLDate, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import (
    BaseModel,
    ContactMixin,
    ExpenseStatus,
    HostelStatus,
    Money,
    TimestampModel,
    UUIDMixin,
    enum_values,
)


expense_status_type = Enum(ExpenseStatus, name="expense_status_enum", values_callable=enum_values)


class Hostel(UUIDMixin, TimestampModel, ContactMixin, BaseModel):
    """Student accommodation, optionally tied to a university."""

    __tablename__ = "hostels"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    university_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("universities.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monthly_rent: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    status: Mapped[HostelStatus] = mapped_column(
        Enum(HostelStatus, name="hostel_status_enum", values_callable=enum_values),
        nullable=False,
        default=HostelStatus.ACTIVE,
    )

    university = relationship("University", back_populates="hostels", lazy="joined")
    expenses: Mapped[List["HostelExpense"]] = relationship(
        "HostelExpense",
        back_populates="hostel",
        cascade="all, delete-orphan",
        lazy="select",
    )


class HostelExpense(UUIDMixin, TimestampModel, BaseModel):
    """Expense booked against a hostel."""

    __tablename__ = "hostel_expenses"

    hostel_id: Mapped[UUID] = mapped_column(
        ForeignKey("hostels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expense_type: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="general")
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    expense_date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)
    status: Mapped[ExpenseStatus] = mapped_column(
        expense_status_type,
        nullable=False,
        default=ExpenseStatus.PENDING,
    )
    vendor_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    hostel = relationship("Hostel", back_populates="expenses", lazy="select")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_hostel_expense_amount_positive"),
    )
