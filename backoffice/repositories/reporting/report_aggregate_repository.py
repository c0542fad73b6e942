"""
Report Aggregate Repository

Aggregated queries across students, agents, the fee ledger and the
expense tables. Every method reads fresh rows; nothing is cached.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from sqlalchemy import and_, case, distinct, func
from sqlalchemy.orm import Session

from backoffice.models.academic import University
from backoffice.models.base import ExpenseStatus, PaymentStatus
from backoffice.models.expense import Hostel, HostelExpense, OfficeExpense, PersonalExpense, StaffSalary
from backoffice.models.fee_structure import FeeStructureComponent, FeeType
from backoffice.models.payment import FeePayment
from backoffice.models.student import Agent, Student

ZERO = Decimal("0.00")


def _money(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(Decimal("0.01"))


class ReportAggregateRepository:
    """
    Report Aggregate Repository

    Provides the grouped sums behind the reporting service.
    """

    def __init__(self, session: Session):
        self.session = session

    # ============================================================
    # Ledger totals by owner
    # ============================================================

    def agent_student_totals(self) -> List[Dict[str, Any]]:
        """
        Per agent: number of students and the due/paid totals of their
        ledger rows. Agents without students are included with zeros.
        """
        rows = (
            self.session.query(
                Agent.id,
                Agent.name,
                Agent.contact_person,
                func.count(distinct(Student.id)).label("student_count"),
                func.coalesce(func.sum(FeePayment.amount_due), 0).label("total_due"),
                func.coalesce(func.sum(FeePayment.amount_paid), 0).label("total_paid"),
            )
            .outerjoin(Student, Student.agent_id == Agent.id)
            .outerjoin(FeePayment, FeePayment.student_id == Student.id)
            .group_by(Agent.id, Agent.name, Agent.contact_person)
            .order_by(Agent.name)
            .all()
        )

        return [
            {
                "agent_id": row.id,
                "name": row.name,
                "contact_person": row.contact_person,
                "student_count": int(row.student_count or 0),
                "total_due": _money(row.total_due),
                "total_paid": _money(row.total_paid),
            }
            for row in rows
        ]

    def university_fee_totals(self) -> List[Dict[str, Any]]:
        """Per university: number of students and their due/paid totals."""
        rows = (
            self.session.query(
                University.id,
                University.name,
                func.count(distinct(Student.id)).label("student_count"),
                func.coalesce(func.sum(FeePayment.amount_due), 0).label("total_due"),
                func.coalesce(func.sum(FeePayment.amount_paid), 0).label("total_paid"),
            )
            .outerjoin(Student, Student.university_id == University.id)
            .outerjoin(FeePayment, FeePayment.student_id == Student.id)
            .group_by(University.id, University.name)
            .order_by(University.name)
            .all()
        )

        return [
            {
                "university_id": row.id,
                "name": row.name,
                "student_count": int(row.student_count or 0),
                "total_due": _money(row.total_due),
                "total_paid": _money(row.total_paid),
            }
            for row in rows
        ]

    def agent_received_totals(self) -> List[Dict[str, Any]]:
        """Per agent: total paid by the agent's students, with the commission settings."""
        rows = (
            self.session.query(
                Agent.id,
                Agent.name,
                Agent.commission_rate,
                Agent.commission_payment_status,
                func.count(distinct(Student.id)).label("student_count"),
                func.coalesce(func.sum(FeePayment.amount_paid), 0).label("total_received"),
            )
            .outerjoin(Student, Student.agent_id == Agent.id)
            .outerjoin(FeePayment, FeePayment.student_id == Student.id)
            .group_by(Agent.id, Agent.name, Agent.commission_rate, Agent.commission_payment_status)
            .order_by(Agent.name)
            .all()
        )

        return [
            {
                "agent_id": row.id,
                "name": row.name,
                "commission_rate": Decimal(str(row.commission_rate or 0)),
                "payment_status": row.commission_payment_status,
                "student_count": int(row.student_count or 0),
                "total_received": _money(row.total_received),
            }
            for row in rows
        ]

    # ============================================================
    # Income and expenses by date
    # ============================================================

    def income_entries(self, start: Date, end: Date) -> List[Tuple[Date, Decimal]]:
        """(last_payment_date, amount_paid) of ledger rows paid within [start, end]."""
        rows = (
            self.session.query(FeePayment.last_payment_date, FeePayment.amount_paid)
            .filter(
                FeePayment.last_payment_date.isnot(None),
                FeePayment.last_payment_date >= start,
                FeePayment.last_payment_date <= end,
            )
            .all()
        )
        return [(row[0], _money(row[1])) for row in rows]

    def expense_entries(self, start: Date, end: Date) -> Dict[str, List[Tuple[Date, Decimal]]]:
        """
        Dated expense amounts within [start, end], keyed by source.

        Office expenses contribute monthly_total, salaries net_salary keyed
        on salary_month.
        """
        sources = {
            "hostel": (HostelExpense.expense_date, HostelExpense.amount),
            "office": (OfficeExpense.expense_date, OfficeExpense.monthly_total),
            "salary": (StaffSalary.salary_month, StaffSalary.net_salary),
            "personal": (PersonalExpense.expense_date, PersonalExpense.amount),
        }

        result: Dict[str, List[Tuple[Date, Decimal]]] = {}
        for key, (date_col, amount_col) in sources.items():
            rows = (
                self.session.query(date_col, amount_col)
                .filter(date_col >= start, date_col <= end)
                .all()
            )
            result[key] = [(row[0], _money(row[1])) for row in rows]
        return result

    # ============================================================
    # Hostels
    # ============================================================

    def hostel_expense_totals(self) -> List[Dict[str, Any]]:
        """Per hostel: total, paid and pending expense sums with the university name."""
        paid = case((HostelExpense.status == ExpenseStatus.PAID, HostelExpense.amount), else_=0)
        pending = case((HostelExpense.status == ExpenseStatus.PENDING, HostelExpense.amount), else_=0)

        rows = (
            self.session.query(
                Hostel.id,
                Hostel.name,
                University.name.label("university_name"),
                func.count(HostelExpense.id).label("expense_count"),
                func.coalesce(func.sum(HostelExpense.amount), 0).label("total_expenses"),
                func.coalesce(func.sum(paid), 0).label("paid_expenses"),
                func.coalesce(func.sum(pending), 0).label("pending_expenses"),
            )
            .outerjoin(University, University.id == Hostel.university_id)
            .outerjoin(HostelExpense, HostelExpense.hostel_id == Hostel.id)
            .group_by(Hostel.id, Hostel.name, University.name)
            .order_by(Hostel.name)
            .all()
        )

        return [
            {
                "hostel_id": row.id,
                "hostel_name": row.name,
                "university_name": row.university_name,
                "expense_count": int(row.expense_count or 0),
                "total_expenses": _money(row.total_expenses),
                "paid_expenses": _money(row.paid_expenses),
                "pending_expenses": _money(row.pending_expenses),
            }
            for row in rows
        ]

    # ============================================================
    # Outstanding ledger rows
    # ============================================================

    def outstanding_ledger_rows(self) -> List[Dict[str, Any]]:
        """Ledger rows that are not paid and still carry a positive balance."""
        rows = (
            self.session.query(
                FeePayment.id,
                FeePayment.student_id,
                Student.first_name,
                Student.last_name,
                Student.admission_number,
                FeeType.name.label("fee_type"),
                FeePayment.amount_due,
                FeePayment.amount_paid,
                FeePayment.due_date,
                FeePayment.payment_status,
            )
            .join(Student, Student.id == FeePayment.student_id)
            .join(FeeStructureComponent, FeeStructureComponent.id == FeePayment.fee_structure_component_id)
            .join(FeeType, FeeType.id == FeeStructureComponent.fee_type_id)
            .filter(
                and_(
                    FeePayment.payment_status != PaymentStatus.PAID,
                    FeePayment.amount_due > FeePayment.amount_paid,
                )
            )
            .all()
        )

        return [
            {
                "payment_id": row.id,
                "student_id": row.student_id,
                "student_name": f"{row.first_name} {row.last_name}",
                "admission_number": row.admission_number,
                "fee_type": row.fee_type,
                "amount_due": _money(row.amount_due),
                "amount_paid": _money(row.amount_paid),
                "due_date": row.due_date,
                "payment_status": row.payment_status,
            }
            for row in rows
        ]
