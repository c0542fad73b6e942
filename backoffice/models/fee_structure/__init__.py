"""Fee catalog, structure and assignment models."""

from backoffice.models.fee_structure.fee_assignment import StudentFeeAssignment, StudentFeeCustomization
from backoffice.models.fee_structure.fee_structure import FeeStructure, FeeStructureComponent
from backoffice.models.fee_structure.fee_type import FeeType

__all__ = [
    "FeeStructure",
    "FeeStructureComponent",
    "FeeType",
    "StudentFeeAssignment",
    "StudentFeeCustomization",
]
