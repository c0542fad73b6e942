"""
Database models.

Importing this package registers every mapped class on the shared
declarative base.
"""

from backoffice.models.academic import AcademicSession, Course, University
from backoffice.models.common import NumberSequence
from backoffice.models.expense import Hostel, HostelExpense, OfficeExpense, PersonalExpense, StaffSalary
from backoffice.models.fee_structure import (
    FeeStructure,
    FeeStructureComponent,
    FeeType,
    StudentFeeAssignment,
    StudentFeeCustomization,
)
from backoffice.models.invoice import Invoice
from backoffice.models.payment import FeePayment
from backoffice.models.student import Agent, Student

__all__ = [
    "AcademicSession",
    "Agent",
    "Course",
    "FeePayment",
    "FeeStructure",
    "FeeStructureComponent",
    "FeeType",
    "Hostel",
    "HostelExpense",
    "Invoice",
    "NumberSequence",
    "OfficeExpense",
    "PersonalExpense",
    "StaffSalary",
    "Student",
    "StudentFeeAssignment",
    "StudentFeeCustomization",
    "University",
]
