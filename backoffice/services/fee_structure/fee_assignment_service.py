"""
Fee Assignment Service

Applies a fee structure to a filtered set of students, materialising one
ledger row per (student, component) pair. The whole assignment is one
transaction: either every row is written or none is.
"""

from datetime import date as Date, timedelta
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from backoffice.config.settings import ReassignmentPolicy, settings
from backoffice.core.exceptions import AlreadyAssignedError, ErrorCode, FeeAssignmentError
from backoffice.models.base import PaymentStatus
from backoffice.models.fee_structure import FeeStructure, StudentFeeAssignment
from backoffice.models.payment import FeePayment
from backoffice.models.student import Student
from backoffice.repositories.fee_structure import (
    FeeStructureRepository,
    StudentFeeAssignmentRepository,
    StudentFeeCustomizationRepository,
)
from backoffice.repositories.payment import FeePaymentRepository
from backoffice.repositories.student import StudentRepository
from backoffice.schemas.fee_structure import FeeAssignmentRequest, FeeAssignmentResult, StudentSelection
from backoffice.services.base import BaseService, ServiceResult


class FeeAssignmentService(BaseService[StudentFeeAssignment, StudentFeeAssignmentRepository]):
    """
    Fee structure assignment.

    What happens to (student, component) pairs that already hold a ledger
    row is governed by the reassignment policy:

    - skip: leave them alone and create only the missing pairs
    - error: reject the whole request
    - duplicate: create another ledger row regardless
    """

    entity_name = "Fee assignment"

    def __init__(
        self,
        repository: StudentFeeAssignmentRepository,
        db_session: Session,
        reassignment_policy: Optional[ReassignmentPolicy] = None,
        default_due_days: Optional[int] = None,
    ):
        super().__init__(repository, db_session)
        self.structure_repository = FeeStructureRepository(db_session)
        self.student_repository = StudentRepository(db_session)
        self.payment_repository = FeePaymentRepository(db_session)
        self.customization_repository = StudentFeeCustomizationRepository(db_session)
        self.reassignment_policy = reassignment_policy or settings.FEE_REASSIGNMENT_POLICY
        self.default_due_days = (
            default_due_days if default_due_days is not None else settings.FEE_DEFAULT_DUE_DAYS
        )

    def assign(
        self,
        request: FeeAssignmentRequest,
        as_of: Optional[Date] = None,
    ) -> ServiceResult[FeeAssignmentResult]:
        """
        Assign a fee structure to the selected students.

        Args:
            request: Structure, student selection and optional due date
            as_of: Assignment date used for the default due date (defaults to today)

        Returns:
            ServiceResult containing created and skipped counts
        """
        try:
            structure = self.structure_repository.find_with_components(request.fee_structure_id)
            if not structure:
                return ServiceResult.not_found("Fee structure", str(request.fee_structure_id))

            self._check_structure(structure)
            students = self._select_students(request.selection)

            assigned_on = as_of or Date.today()
            due_date = request.due_date or assigned_on + timedelta(days=self.default_due_days)

            student_ids = [s.id for s in students]
            component_ids = [c.id for c in structure.components]

            existing = set()
            if self.reassignment_policy != ReassignmentPolicy.DUPLICATE:
                existing = self.payment_repository.existing_pairs(student_ids, component_ids)
            if existing and self.reassignment_policy == ReassignmentPolicy.ERROR:
                raise AlreadyAssignedError(len(existing), str(structure.id))

            customizations = self.customization_repository.map_for(student_ids, component_ids)

            payments: List[FeePayment] = []
            for student in students:
                for component in structure.components:
                    if (student.id, component.id) in existing:
                        continue
                    customization = customizations.get((student.id, component.id))
                    amount_due = customization.custom_amount if customization else component.amount
                    payments.append(
                        FeePayment(
                            student_id=student.id,
                            fee_structure_component_id=component.id,
                            amount_due=Decimal(amount_due),
                            amount_paid=Decimal("0.00"),
                            due_date=due_date,
                            payment_status=PaymentStatus.PENDING,
                        )
                    )

            already_recorded = self.repository.assigned_student_ids(structure.id, student_ids)
            assignments = [
                StudentFeeAssignment(student_id=sid, fee_structure_id=structure.id)
                for sid in student_ids
                if sid not in already_recorded
            ]

            with self.transaction():
                self.payment_repository.create_many(payments, commit=False)
                self.repository.create_many(assignments, commit=False)

            result = FeeAssignmentResult(
                fee_structure_id=structure.id,
                student_count=len(students),
                created_count=len(payments),
                skipped_count=len(existing),
            )
            self._logger.info(
                "Fee structure assigned",
                extra={
                    "fee_structure_id": str(structure.id),
                    "student_count": result.student_count,
                    "created_count": result.created_count,
                    "skipped_count": result.skipped_count,
                    "policy": self.reassignment_policy.value,
                },
            )
            return ServiceResult.success(
                result,
                message=f"{result.created_count} fee record(s) created",
            )
        except Exception as e:
            return self._handle_exception(e, "assign fee structure", request.fee_structure_id)

    def _check_structure(self, structure: FeeStructure) -> None:
        if not structure.is_active:
            raise FeeAssignmentError(
                f"Fee structure '{structure.name}' is inactive",
                ErrorCode.INACTIVE_FEE_STRUCTURE,
            )
        if not structure.components:
            raise FeeAssignmentError(f"Fee structure '{structure.name}' has no components")

        inactive = sorted(
            c.fee_type.name for c in structure.components if c.fee_type is not None and not c.fee_type.is_active
        )
        if inactive:
            raise FeeAssignmentError(
                f"Fee structure uses inactive fee types: {', '.join(inactive)}",
                ErrorCode.INACTIVE_FEE_STRUCTURE,
            )

    def _select_students(self, selection: StudentSelection) -> List[Student]:
        if selection.is_empty():
            raise FeeAssignmentError(
                "Select students or provide at least one filter",
                ErrorCode.EMPTY_SELECTION,
            )

        students = self.student_repository.find_for_assignment(
            student_ids=selection.student_ids,
            course_id=selection.course_id,
            academic_session_id=selection.academic_session_id,
            university_id=selection.university_id,
            name=selection.name,
        )
        if not students:
            raise FeeAssignmentError("No students match the selection", ErrorCode.EMPTY_SELECTION)
        return students
