"""Expense schemas."""

from backoffice.schemas.expense.hostel import (
    HostelCreate,
    HostelExpenseCreate,
    HostelExpenseResponse,
    HostelExpenseUpdate,
    HostelResponse,
    HostelUpdate,
)
from backoffice.schemas.expense.office import (
    OfficeExpenseCreate,
    OfficeExpenseResponse,
    OfficeExpenseUpdate,
    PersonalExpenseCreate,
    PersonalExpenseResponse,
    PersonalExpenseUpdate,
    StaffSalaryCreate,
    StaffSalaryResponse,
    StaffSalaryUpdate,
)

__all__ = [
    "HostelCreate",
    "HostelExpenseCreate",
    "HostelExpenseResponse",
    "HostelExpenseUpdate",
    "HostelResponse",
    "HostelUpdate",
    "OfficeExpenseCreate",
    "OfficeExpenseResponse",
    "OfficeExpenseUpdate",
    "PersonalExpenseCreate",
    "PersonalExpenseResponse",
    "PersonalExpenseUpdate",
    "StaffSalaryCreate",
    "StaffSalaryResponse",
    "StaffSalaryUpdate",
]
