"""
Repositories Package

Data access layer: one repository per aggregate, all built on
BaseRepository, plus the read-only report aggregates.
"""

from backoffice.repositories.academic import (
    AcademicSessionRepository,
    CourseRepository,
    UniversityRepository,
)
from backoffice.repositories.base import BaseRepository
from backoffice.repositories.common import NumberSequenceRepository
from backoffice.repositories.expense import (
    HostelExpenseRepository,
    HostelRepository,
    OfficeExpenseRepository,
    PersonalExpenseRepository,
    StaffSalaryRepository,
)
from backoffice.repositories.fee_structure import (
    FeeStructureComponentRepository,
    FeeStructureRepository,
    FeeTypeRepository,
    StudentFeeAssignmentRepository,
    StudentFeeCustomizationRepository,
)
from backoffice.repositories.invoice import InvoiceRepository
from backoffice.repositories.payment import FeePaymentRepository
from backoffice.repositories.reporting import ReportAggregateRepository
from backoffice.repositories.student import AgentRepository, StudentRepository

__all__ = [
    "AcademicSessionRepository",
    "AgentRepository",
    "BaseRepository",
    "CourseRepository",
    "FeePaymentRepository",
    "FeeStructureComponentRepository",
    "FeeStructureRepository",
    "FeeTypeRepository",
    "HostelExpenseRepository",
    "HostelRepository",
    "InvoiceRepository",
    "NumberSequenceRepository",
    "OfficeExpenseRepository",
    "PersonalExpenseRepository",
    "ReportAggregateRepository",
    "StaffSalaryRepository",
    "StudentFeeAssignmentRepository",
    "StudentFeeCustomizationRepository",
    "StudentRepository",
    "UniversityRepository",
]
