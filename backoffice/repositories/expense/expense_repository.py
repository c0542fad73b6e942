"""
Expense Repositories

Hostels, hostel expenses, office expenses, staff salaries and personal
expenses.
"""

from sqlalchemy.orm import Session

from backoffice.models.expense import Hostel, HostelExpense, OfficeExpense, PersonalExpense, StaffSalary
from backoffice.repositories.base.base_repository import BaseRepository


class HostelRepository(BaseRepository[Hostel]):

    def __init__(self, db: Session):
        super().__init__(Hostel, db)


class HostelExpenseRepository(BaseRepository[HostelExpense]):

    def __init__(self, db: Session):
        super().__init__(HostelExpense, db)


class OfficeExpenseRepository(BaseRepository[OfficeExpense]):

    def __init__(self, db: Session):
        super().__init__(OfficeExpense, db)


class StaffSalaryRepository(BaseRepository[StaffSalary]):

    def __init__(self, db: Session):
        super().__init__(StaffSalary, db)


class PersonalExpenseRepository(BaseRepository[PersonalExpense]):

    def __init__(self, db: Session):
        super().__init__(PersonalExpense, db)
