"""
Fee Ledger Service

Writes FeePayment amounts and status; component repricing in the fee
structure service is the other writer. Every write recomputes
payment_status from amount_due and amount_paid in the same flush.
"""

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.core.exceptions import OptimisticLockError
from backoffice.models.base import FeeFrequency
from backoffice.models.fee_structure import StudentFeeCustomization
from backoffice.models.payment import FeePayment
from backoffice.repositories.fee_structure import (
    FeeStructureComponentRepository,
    StudentFeeCustomizationRepository,
)
from backoffice.repositories.payment import FeePaymentRepository
from backoffice.repositories.student import StudentRepository
from backoffice.schemas.common.base import quantize_money
from backoffice.schemas.fee_structure import OneTimeChargeEntry
from backoffice.services.base import BaseService, ServiceResult
from backoffice.services.payment.payment_rules import derive_payment_status


class FeeLedgerService(BaseService[FeePayment, FeePaymentRepository]):
    """
    Fee ledger operations.

    No payment history is kept: update_payment receives the new
    cumulative amount paid and overwrites it.
    """

    entity_name = "Fee payment"

    def __init__(self, repository: FeePaymentRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.customization_repository = StudentFeeCustomizationRepository(db_session)
        self.component_repository = FeeStructureComponentRepository(db_session)
        self.student_repository = StudentRepository(db_session)

    # -------------------------------------------------------------------------
    # Payments
    # -------------------------------------------------------------------------

    def update_payment(
        self,
        payment_id: UUID,
        amount_paid: Decimal,
        expected_version: Optional[int] = None,
        as_of: Optional[Date] = None,
    ) -> ServiceResult[FeePayment]:
        """
        Record the new cumulative amount paid for a ledger row.

        Args:
            payment_id: Ledger row
            amount_paid: New total paid (not an increment)
            expected_version: Version the caller last read; a mismatch is a conflict
            as_of: Payment date (defaults to today)

        Returns:
            ServiceResult containing the updated ledger row
        """
        if amount_paid is None or Decimal(amount_paid) < 0:
            return ServiceResult.validation_failure(
                "Amount paid cannot be negative",
                field="amount_paid",
                details={"amount_paid": str(amount_paid)},
            )

        try:
            payment = self.repository.find_by_id(payment_id)
            if not payment:
                return ServiceResult.not_found(self.entity_name, str(payment_id))

            if expected_version is not None and payment.version != expected_version:
                raise OptimisticLockError(
                    f"Fee payment was modified (expected version {expected_version}, "
                    f"found {payment.version}); reload and retry",
                    expected_version=expected_version,
                    actual_version=payment.version,
                )

            amount = quantize_money(Decimal(amount_paid))
            data = {
                "amount_paid": amount,
                "payment_status": derive_payment_status(payment.amount_due, amount),
            }
            if amount != 0:
                data["last_payment_date"] = as_of or Date.today()

            with self.transaction():
                self.repository.update_entity(payment, data, version=expected_version, commit=False)

            self.repository.refresh(payment)
            self._logger.info(
                "Fee payment updated",
                extra={
                    "payment_id": str(payment_id),
                    "amount_paid": str(amount),
                    "payment_status": payment.payment_status.value,
                    "version": payment.version,
                },
            )
            return ServiceResult.success(payment, message="Payment updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update fee payment", payment_id)

    def list_for_student(self, student_id: UUID, unpaid_only: bool = False) -> ServiceResult[List[FeePayment]]:
        try:
            if not self.student_repository.find_by_id(student_id):
                return ServiceResult.not_found("Student", str(student_id))
            return ServiceResult.success(self.repository.find_by_student(student_id, unpaid_only=unpaid_only))
        except Exception as e:
            return self._handle_exception(e, "list student fee payments", student_id)

    # -------------------------------------------------------------------------
    # Customizations
    # -------------------------------------------------------------------------

    def apply_custom_amount(
        self,
        student_id: UUID,
        component_id: UUID,
        custom_amount: Decimal,
        reason: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> ServiceResult[StudentFeeCustomization]:
        """
        Override one component's amount for one student.

        Upserts the customization and rewrites amount_due (and status) of
        that student's ledger rows for the component in the same
        transaction. Other students are untouched.
        """
        if custom_amount is None or Decimal(custom_amount) < 0:
            return ServiceResult.validation_failure(
                "Custom amount cannot be negative",
                field="custom_amount",
                details={"custom_amount": str(custom_amount)},
            )

        try:
            if not self.student_repository.find_by_id(student_id):
                return ServiceResult.not_found("Student", str(student_id))
            if not self.component_repository.find_by_id(component_id):
                return ServiceResult.not_found("Fee structure component", str(component_id))

            amount = quantize_money(Decimal(custom_amount))
            payments = self.repository.find_for_student_component(student_id, component_id)

            with self.transaction():
                customization = self.customization_repository.find_for(student_id, component_id)
                if customization is None:
                    customization = self.customization_repository.create(
                        StudentFeeCustomization(
                            student_id=student_id,
                            fee_structure_component_id=component_id,
                            custom_amount=amount,
                            reason=reason,
                            created_by=created_by,
                        ),
                        commit=False,
                    )
                else:
                    self.customization_repository.update_entity(
                        customization,
                        {"custom_amount": amount, "reason": reason, "created_by": created_by},
                        commit=False,
                    )

                for payment in payments:
                    self.repository.update_entity(
                        payment,
                        {
                            "amount_due": amount,
                            "payment_status": derive_payment_status(amount, payment.amount_paid),
                        },
                        commit=False,
                    )

            self.customization_repository.refresh(customization)
            self._logger.info(
                "Custom fee amount applied",
                extra={
                    "student_id": str(student_id),
                    "component_id": str(component_id),
                    "custom_amount": str(amount),
                    "ledger_rows": len(payments),
                },
            )
            return ServiceResult.success(
                customization,
                message="Custom amount applied",
                metadata={"updated_rows": len(payments)},
            )
        except Exception as e:
            return self._handle_exception(e, "apply custom fee amount", student_id)

    def list_one_time_charges(self, student_id: Optional[UUID] = None) -> ServiceResult[List[OneTimeChargeEntry]]:
        """Ledger rows for one-time components, with each student's override if present."""
        try:
            payments = self.repository.find_by_frequency(FeeFrequency.ONE_TIME, student_id=student_id)
            customizations = self.customization_repository.map_for(
                {p.student_id for p in payments},
                {p.fee_structure_component_id for p in payments},
            )

            entries = []
            for payment in payments:
                component = payment.component
                customization = customizations.get((payment.student_id, payment.fee_structure_component_id))
                entries.append(
                    OneTimeChargeEntry(
                        payment_id=payment.id,
                        student_id=payment.student_id,
                        student_name=payment.student.full_name,
                        admission_number=payment.student.admission_number,
                        fee_structure_component_id=payment.fee_structure_component_id,
                        fee_type=component.fee_type.name if component.fee_type else None,
                        standard_amount=component.amount,
                        custom_amount=customization.custom_amount if customization else None,
                        amount_due=payment.amount_due,
                        amount_paid=payment.amount_paid,
                        payment_status=payment.payment_status,
                    )
                )

            entries.sort(key=lambda e: (e.student_name.lower(), e.fee_type or ""))
            return ServiceResult.success(entries)
        except Exception as e:
            return self._handle_exception(e, "list one-time charges")
