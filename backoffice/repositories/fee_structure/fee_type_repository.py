"""
Fee Type Repository
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from backoffice.models.fee_structure import FeeStructureComponent, FeeType
from backoffice.repositories.base.base_repository import BaseRepository


class FeeTypeRepository(BaseRepository[FeeType]):
    """Fee catalog queries."""

    def __init__(self, db: Session):
        super().__init__(FeeType, db)

    def find_by_name(self, name: str) -> Optional[FeeType]:
        return (
            self.db.query(FeeType)
            .filter(func.lower(FeeType.name) == name.strip().lower())
            .first()
        )

    def count_component_references(self, fee_type_id: UUID) -> int:
        """Number of fee structure components built on this fee type."""
        return (
            self.db.query(func.count(FeeStructureComponent.id))
            .filter(FeeStructureComponent.fee_type_id == fee_type_id)
            .scalar()
            or 0
        )
