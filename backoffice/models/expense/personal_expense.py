"""
Personal Expense Model
"""

from datetime import date as Date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date as SQLDate, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.models.base import BaseModel, Money, TimestampModel, UUIDMixin


class PersonalExpense(UUIDMixin, TimestampModel, BaseModel):
    """Expense paid on behalf of the office by an individual."""

    __tablename__ = "personal_expenses"

    description: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="general")
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    expense_date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)
    payment_mode: Mapped[str] = mapped_column(String(50), nullable=False, default="cash")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_personal_expense_amount_positive"),
    )
