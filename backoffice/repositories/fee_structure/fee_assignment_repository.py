"""
Fee Assignment Repositories

Assignment records and per-student component customizations.
"""

from typing import Dict, Iterable, Optional, Set, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.models.fee_structure import StudentFeeAssignment, StudentFeeCustomization
from backoffice.repositories.base.base_repository import BaseRepository


class StudentFeeAssignmentRepository(BaseRepository[StudentFeeAssignment]):

    def __init__(self, db: Session):
        super().__init__(StudentFeeAssignment, db)

    def assigned_student_ids(self, fee_structure_id: UUID, student_ids: Iterable[UUID]) -> Set[UUID]:
        """Students among ``student_ids`` already holding an assignment record."""
        ids = list(student_ids)
        if not ids:
            return set()
        rows = (
            self.db.query(StudentFeeAssignment.student_id)
            .filter(
                StudentFeeAssignment.fee_structure_id == fee_structure_id,
                StudentFeeAssignment.student_id.in_(ids),
            )
            .all()
        )
        return {row[0] for row in rows}


class StudentFeeCustomizationRepository(BaseRepository[StudentFeeCustomization]):
    """Per-student component overrides."""

    def __init__(self, db: Session):
        super().__init__(StudentFeeCustomization, db)

    def find_for(self, student_id: UUID, component_id: UUID) -> Optional[StudentFeeCustomization]:
        return (
            self.db.query(StudentFeeCustomization)
            .filter(
                StudentFeeCustomization.student_id == student_id,
                StudentFeeCustomization.fee_structure_component_id == component_id,
            )
            .first()
        )

    def map_for(
        self,
        student_ids: Iterable[UUID],
        component_ids: Iterable[UUID],
    ) -> Dict[Tuple[UUID, UUID], StudentFeeCustomization]:
        """Customizations keyed by (student_id, component_id)."""
        sids, cids = list(student_ids), list(component_ids)
        if not sids or not cids:
            return {}
        rows = (
            self.db.query(StudentFeeCustomization)
            .filter(
                StudentFeeCustomization.student_id.in_(sids),
                StudentFeeCustomization.fee_structure_component_id.in_(cids),
            )
            .all()
        )
        return {(row.student_id, row.fee_structure_component_id): row for row in rows}
