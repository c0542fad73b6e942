"""Hostel, office, salary and personal expense models."""

from backoffice.models.expense.hostel import Hostel, HostelExpense
from backoffice.models.expense.office_expense import OFFICE_EXPENSE_LINES, OfficeExpense
from backoffice.models.expense.personal_expense import PersonalExpense
from backoffice.models.expense.staff_salary import StaffSalary

__all__ = [
    "Hostel",
    "HostelExpense",
    "OFFICE_EXPENSE_LINES",
    "OfficeExpense",
    "PersonalExpense",
    "StaffSalary",
]
