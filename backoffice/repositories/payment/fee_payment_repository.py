"""
Fee Payment Repository

Ledger row queries. Writes go through the fee ledger and fee structure
services, which keep payment_status derived from the amounts.
"""

from typing import Iterable, List, Optional, Set, Tuple
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from backoffice.models.base import FeeFrequency, PaymentStatus
from backoffice.models.fee_structure import FeeStructureComponent
from backoffice.models.payment import FeePayment
from backoffice.repositories.base.base_repository import BaseRepository


class FeePaymentRepository(BaseRepository[FeePayment]):
    """Fee ledger queries."""

    def __init__(self, db: Session):
        super().__init__(FeePayment, db)

    def existing_pairs(
        self,
        student_ids: Iterable[UUID],
        component_ids: Iterable[UUID],
    ) -> Set[Tuple[UUID, UUID]]:
        """(student_id, component_id) pairs that already have a ledger row."""
        sids, cids = list(student_ids), list(component_ids)
        if not sids or not cids:
            return set()
        rows = (
            self.db.query(FeePayment.student_id, FeePayment.fee_structure_component_id)
            .filter(
                FeePayment.student_id.in_(sids),
                FeePayment.fee_structure_component_id.in_(cids),
            )
            .all()
        )
        return {(row[0], row[1]) for row in rows}

    def find_for_student_component(self, student_id: UUID, component_id: UUID) -> List[FeePayment]:
        return (
            self.db.query(FeePayment)
            .filter(
                FeePayment.student_id == student_id,
                FeePayment.fee_structure_component_id == component_id,
            )
            .all()
        )

    def find_by_student(self, student_id: UUID, unpaid_only: bool = False) -> List[FeePayment]:
        """Ledger rows of one student, earliest due first, undated rows last."""
        query = self.db.query(FeePayment).filter(FeePayment.student_id == student_id)
        if unpaid_only:
            query = query.filter(FeePayment.payment_status != PaymentStatus.PAID)
        return query.order_by(FeePayment.due_date.is_(None), FeePayment.due_date).all()

    def find_by_frequency(
        self,
        frequency: FeeFrequency,
        student_id: Optional[UUID] = None,
    ) -> List[FeePayment]:
        query = (
            self.db.query(FeePayment)
            .join(FeeStructureComponent, FeePayment.fee_structure_component_id == FeeStructureComponent.id)
            .options(joinedload(FeePayment.student))
            .filter(FeeStructureComponent.frequency == frequency)
        )
        if student_id:
            query = query.filter(FeePayment.student_id == student_id)
        return query.all()
