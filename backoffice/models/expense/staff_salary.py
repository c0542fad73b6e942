"""
Staff Salary Model
"""

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date as SQLDate, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.models.base import BaseModel, Money, SalaryPaymentStatus, TimestampModel, UUIDMixin, enum_values


class StaffSalary(UUIDMixin, TimestampModel, BaseModel):
    """
    Monthly salary record.

    gross_salary = basic_salary + allowances
    net_salary = gross_salary - deductions
    """

    __tablename__ = "staff_salaries"

    staff_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    salary_month: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)

    basic_salary: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    allowances: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    deductions: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    gross_salary: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))
    net_salary: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0.00"))

    payment_status: Mapped[SalaryPaymentStatus] = mapped_column(
        Enum(SalaryPaymentStatus, name="salary_payment_status_enum", values_callable=enum_values),
        nullable=False,
        default=SalaryPaymentStatus.PENDING,
    )
    payment_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)
    payment_method: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
