"""
Report row schemas.

Field names double as CSV column headers on export.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from backoffice.models.base import AlertSeverity, CommissionPaymentStatus, PaymentStatus
from backoffice.schemas.common.base import BaseSchema

__all__ = [
    "AgentStudentReportRow",
    "UniversityFeeReportRow",
    "ProfitLossPeriod",
    "ProfitLossReport",
    "HostelExpenseReportRow",
    "DuePaymentAlert",
    "AgentCommissionReportRow",
]


class AgentStudentReportRow(BaseSchema):
    agent_id: UUID
    name: str
    contact_person: Optional[str] = None
    student_count: int
    total_due: Decimal
    total_paid: Decimal
    total_pending: Decimal


class UniversityFeeReportRow(BaseSchema):
    university_id: UUID
    name: str
    student_count: int
    total_due: Decimal
    total_paid: Decimal
    total_pending: Decimal


class ProfitLossPeriod(BaseSchema):
    """Income and expenses for one month (or the whole year)."""

    period: str
    total_income: Decimal
    hostel_expenses: Decimal
    office_expenses: Decimal
    salary_expenses: Decimal
    personal_expenses: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: float


class ProfitLossReport(BaseSchema):
    year: int
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: float
    expense_breakdown: ProfitLossPeriod
    monthly: List[ProfitLossPeriod] = Field(default_factory=list)


class HostelExpenseReportRow(BaseSchema):
    hostel_id: UUID
    hostel_name: str
    university_name: Optional[str] = None
    expense_count: int
    total_expenses: Decimal
    paid_expenses: Decimal
    pending_expenses: Decimal


class DuePaymentAlert(BaseSchema):
    payment_id: UUID
    student_id: UUID
    student_name: str
    admission_number: Optional[str] = None
    fee_type: str
    amount_due: Decimal
    amount_paid: Decimal
    balance: Decimal
    due_date: Optional[Date] = None
    days_overdue: int
    payment_status: PaymentStatus
    severity: AlertSeverity


class AgentCommissionReportRow(BaseSchema):
    agent_id: UUID
    name: str
    student_count: int
    commission_rate: Decimal
    total_received: Decimal
    commission_due: Decimal
    payment_status: CommissionPaymentStatus
