"""
Office Expense Model

Monthly office running costs; monthly_total is the sum of the line
columns and is maintained by the expense service.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date as SQLDate, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.models.base import BaseModel, Money, TimestampModel, UUIDMixin

OFFICE_EXPENSE_LINES = ("rent", "utilities", "internet", "marketing", "travel", "miscellaneous")


class OfficeExpense(UUIDMixin, TimestampModel, BaseModel):
    """Office expense sheet for one location and month."""

    __tablename__ = "office_expenses"

    location: Mapped[str] = mapped_column(String(255), nullable=False)
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    expense_date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)

    rent: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    utilities: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    internet: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    marketing: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    travel: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    miscellaneous: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    monthly_total: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))

    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
