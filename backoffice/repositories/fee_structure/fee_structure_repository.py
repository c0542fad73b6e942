"""
Fee Structure Repository

Fee structures and their components.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from backoffice.models.fee_structure import FeeStructure, FeeStructureComponent
from backoffice.repositories.base.base_repository import BaseRepository


class FeeStructureRepository(BaseRepository[FeeStructure]):
    """
    Fee Structure Repository

    Loads structures together with their components and fee types, which
    is what assignment and display both need.
    """

    def __init__(self, db: Session):
        super().__init__(FeeStructure, db)

    def find_with_components(self, fee_structure_id: UUID) -> Optional[FeeStructure]:
        return (
            self.db.query(FeeStructure)
            .options(
                selectinload(FeeStructure.components).joinedload(FeeStructureComponent.fee_type)
            )
            .filter(FeeStructure.id == fee_structure_id)
            .first()
        )


class FeeStructureComponentRepository(BaseRepository[FeeStructureComponent]):
    """Fee structure component queries."""

    def __init__(self, db: Session):
        super().__init__(FeeStructureComponent, db)

    def find_by_structure(self, fee_structure_id: UUID) -> List[FeeStructureComponent]:
        return (
            self.db.query(FeeStructureComponent)
            .filter(FeeStructureComponent.fee_structure_id == fee_structure_id)
            .all()
        )
