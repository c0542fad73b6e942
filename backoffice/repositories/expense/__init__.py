"""Expense repositories."""

from backoffice.repositories.expense.expense_repository import (
    HostelExpenseRepository,
    HostelRepository,
    OfficeExpenseRepository,
    PersonalExpenseRepository,
    StaffSalaryRepository,
)

__all__ = [
    "HostelExpenseRepository",
    "HostelRepository",
    "OfficeExpenseRepository",
    "PersonalExpenseRepository",
    "StaffSalaryRepository",
]
