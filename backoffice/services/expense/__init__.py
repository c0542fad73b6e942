"""Expense services."""

from backoffice.services.expense.expense_service import (
    HostelExpenseService,
    HostelService,
    OfficeExpenseService,
    PersonalExpenseService,
    StaffSalaryService,
    office_monthly_total,
    salary_totals,
)

__all__ = [
    "HostelExpenseService",
    "HostelService",
    "OfficeExpenseService",
    "PersonalExpenseService",
    "StaffSalaryService",
    "office_monthly_total",
    "salary_totals",
]
