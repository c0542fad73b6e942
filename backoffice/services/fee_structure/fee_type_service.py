"""
Fee Type Service

Fee catalog management. A fee type referenced by any fee structure
component cannot be deleted; deactivate it instead.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ErrorCode
from backoffice.models.fee_structure import FeeType
from backoffice.repositories.fee_structure import FeeTypeRepository
from backoffice.services.base import BaseService, ServiceResult


class FeeTypeService(BaseService[FeeType, FeeTypeRepository]):
    """Fee catalog CRUD with name uniqueness and an in-use delete guard."""

    entity_name = "Fee type"

    def __init__(self, repository: FeeTypeRepository, db_session: Session):
        super().__init__(repository, db_session)

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        if self.repository.find_by_name(data["name"]):
            return ServiceResult.conflict(
                f"Fee type '{data['name']}' already exists",
                code=ErrorCode.DUPLICATE_ENTRY,
                details={"name": data["name"]},
            )
        return None

    def _validate_update(self, entity: FeeType, data: Dict[str, Any]) -> Optional[ServiceResult]:
        name = data.get("name")
        if name:
            existing = self.repository.find_by_name(name)
            if existing and existing.id != entity.id:
                return ServiceResult.conflict(
                    f"Fee type '{name}' already exists",
                    code=ErrorCode.DUPLICATE_ENTRY,
                    details={"name": name},
                )
        return None

    def _validate_delete(self, entity_id: UUID) -> Optional[ServiceResult]:
        references = self.repository.count_component_references(entity_id)
        if references:
            return ServiceResult.conflict(
                "Fee type is used by fee structure components and cannot be deleted",
                code=ErrorCode.RESOURCE_IN_USE,
                details={"fee_type_id": str(entity_id), "component_count": references},
            )
        return None
