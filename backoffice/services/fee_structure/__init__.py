"""Fee catalog, structure and assignment services."""

from backoffice.services.fee_structure.fee_assignment_service import FeeAssignmentService
from backoffice.services.fee_structure.fee_structure_service import FeeStructureService
from backoffice.services.fee_structure.fee_type_service import FeeTypeService

__all__ = ["FeeAssignmentService", "FeeStructureService", "FeeTypeService"]
