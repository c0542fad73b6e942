"""
Fee Structure Repositories Package

This module exports all fee catalog and assignment repositories.
"""

from backoffice.repositories.fee_structure.fee_assignment_repository import (
    StudentFeeAssignmentRepository,
    StudentFeeCustomizationRepository,
)
from backoffice.repositories.fee_structure.fee_structure_repository import (
    FeeStructureComponentRepository,
    FeeStructureRepository,
)
from backoffice.repositories.fee_structure.fee_type_repository import FeeTypeRepository

__all__ = [
    "FeeStructureComponentRepository",
    "FeeStructureRepository",
    "FeeTypeRepository",
    "StudentFeeAssignmentRepository",
    "StudentFeeCustomizationRepository",
]
