"""
Student Service

Admissions (with generated admission numbers) and the per-student
financial summary.
"""

from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ErrorCode
from backoffice.models.student import Student
from backoffice.repositories.academic import (
    AcademicSessionRepository,
    CourseRepository,
    UniversityRepository,
)
from backoffice.repositories.common import NumberSequenceRepository
from backoffice.repositories.payment import FeePaymentRepository
from backoffice.repositories.student import AgentRepository, StudentRepository
from backoffice.schemas.common.base import quantize_money
from backoffice.schemas.student import StudentFinancialSummary, UpcomingPayment
from backoffice.services.base import BaseService, ServiceResult
from backoffice.services.numbering import NumberingService

ZERO = Decimal("0.00")


class StudentService(BaseService[Student, StudentRepository]):
    """Student management."""

    entity_name = "Student"

    def __init__(self, repository: StudentRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.payment_repository = FeePaymentRepository(db_session)
        self.numbering = NumberingService(NumberSequenceRepository(db_session), db_session)
        self._references = {
            "university_id": ("University", UniversityRepository(db_session)),
            "course_id": ("Course", CourseRepository(db_session)),
            "academic_session_id": ("Academic session", AcademicSessionRepository(db_session)),
            "agent_id": ("Agent", AgentRepository(db_session)),
        }

    def _check_references(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        for key, (label, repository) in self._references.items():
            value = data.get(key)
            if value is not None and not repository.find_by_id(value):
                return ServiceResult.not_found(label, str(value))
        return None

    def _check_admission_number(self, number: Optional[str], current_id=None) -> Optional[ServiceResult]:
        if not number:
            return None
        existing = self.repository.find_by_admission_number(number)
        if existing and existing.id != current_id:
            return ServiceResult.conflict(
                f"Admission number {number} is already in use",
                code=ErrorCode.DUPLICATE_ENTRY,
                details={"admission_number": number},
            )
        return None

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        failure = self._check_references(data)
        if failure is not None:
            return failure
        return self._check_admission_number(data.get("admission_number"))

    def _validate_update(self, entity: Student, data: Dict[str, Any]) -> Optional[ServiceResult]:
        failure = self._check_references(data)
        if failure is not None:
            return failure
        return self._check_admission_number(data.get("admission_number"), entity.id)

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not data.get("admission_number"):
            data = dict(data, admission_number=self.numbering.allocate_admission_number())
        return data

    def get_financial_summary(self, student_id: UUID) -> ServiceResult[StudentFinancialSummary]:
        """
        Totals across a student's ledger rows.

        pending_amount only counts positive balances, so an overpaid row
        does not offset another row's debt. The next payment is the
        earliest-due unpaid row; undated rows come last.
        """
        try:
            student = self.repository.find_by_id(student_id)
            if not student:
                return ServiceResult.not_found(self.entity_name, str(student_id))

            payments = self.payment_repository.find_by_student(student_id)

            total_due = sum((p.amount_due for p in payments), ZERO)
            total_paid = sum((p.amount_paid for p in payments), ZERO)
            pending = sum((max(p.balance, ZERO) for p in payments), ZERO)

            upcoming = [
                UpcomingPayment(
                    payment_id=p.id,
                    fee_type=p.component.fee_type.name if p.component and p.component.fee_type else None,
                    amount_due=p.amount_due,
                    amount_paid=p.amount_paid,
                    balance=p.balance,
                    due_date=p.due_date,
                    payment_status=p.payment_status,
                )
                for p in payments
                if p.balance > 0
            ]
            next_payment = upcoming[0] if upcoming else None

            summary = StudentFinancialSummary(
                student_id=student.id,
                student_name=student.full_name,
                total_fees=quantize_money(total_due),
                paid_amount=quantize_money(total_paid),
                pending_amount=quantize_money(pending),
                next_payment_amount=next_payment.balance if next_payment else None,
                next_payment_date=next_payment.due_date if next_payment else None,
                upcoming_payments=upcoming,
            )
            return ServiceResult.success(summary)
        except Exception as e:
            return self._handle_exception(e, "build student financial summary", student_id)
