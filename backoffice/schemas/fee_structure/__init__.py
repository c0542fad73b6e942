"""Fee catalog, structure and assignment schemas."""

from backoffice.schemas.fee_structure.fee_assignment import (
    CustomAmountRequest,
    CustomizationResponse,
    FeeAssignmentRequest,
    FeeAssignmentResult,
    OneTimeChargeEntry,
    StudentSelection,
)
from backoffice.schemas.fee_structure.fee_structure import (
    FeeStructureComponentCreate,
    FeeStructureComponentResponse,
    FeeStructureComponentUpdate,
    FeeStructureCreate,
    FeeStructureResponse,
    FeeStructureUpdate,
)
from backoffice.schemas.fee_structure.fee_type import FeeTypeCreate, FeeTypeResponse, FeeTypeUpdate

__all__ = [
    "CustomAmountRequest",
    "CustomizationResponse",
    "FeeAssignmentRequest",
    "FeeAssignmentResult",
    "FeeStructureComponentCreate",
    "FeeStructureComponentResponse",
    "FeeStructureComponentUpdate",
    "FeeStructureCreate",
    "FeeStructureResponse",
    "FeeStructureUpdate",
    "FeeTypeCreate",
    "FeeTypeResponse",
    "FeeTypeUpdate",
    "OneTimeChargeEntry",
    "StudentSelection",
]
