"""
Expense Services

Hostels, hostel expenses, office expenses, staff salaries and personal
expenses. Office totals and salary gross/net are derived here on every
create and update; clients never send them.
"""

from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from backoffice.models.expense import (
    OFFICE_EXPENSE_LINES,
    Hostel,
    HostelExpense,
    OfficeExpense,
    PersonalExpense,
    StaffSalary,
)
from backoffice.repositories.academic import UniversityRepository
from backoffice.repositories.expense import (
    HostelExpenseRepository,
    HostelRepository,
    OfficeExpenseRepository,
    PersonalExpenseRepository,
    StaffSalaryRepository,
)
from backoffice.schemas.common.base import quantize_money
from backoffice.services.base import BaseService, ServiceResult

ZERO = Decimal("0.00")


def office_monthly_total(lines: Dict[str, Any]) -> Decimal:
    """Sum of the office expense line columns."""
    return quantize_money(sum((Decimal(lines.get(k) or 0) for k in OFFICE_EXPENSE_LINES), ZERO))


def salary_totals(basic: Decimal, allowances: Decimal, deductions: Decimal) -> Tuple[Decimal, Decimal]:
    """(gross, net) where gross = basic + allowances and net = gross - deductions."""
    gross = quantize_money(Decimal(basic or 0) + Decimal(allowances or 0))
    net = quantize_money(gross - Decimal(deductions or 0))
    return gross, net


class HostelService(BaseService[Hostel, HostelRepository]):
    entity_name = "Hostel"

    def __init__(self, repository: HostelRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.university_repository = UniversityRepository(db_session)

    def _check_university(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        university_id = data.get("university_id")
        if university_id and not self.university_repository.find_by_id(university_id):
            return ServiceResult.not_found("University", str(university_id))
        return None

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        return self._check_university(data)

    def _validate_update(self, entity: Hostel, data: Dict[str, Any]) -> Optional[ServiceResult]:
        return self._check_university(data)


class HostelExpenseService(BaseService[HostelExpense, HostelExpenseRepository]):
    entity_name = "Hostel expense"

    def __init__(self, repository: HostelExpenseRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.hostel_repository = HostelRepository(db_session)

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        if not self.hostel_repository.find_by_id(data["hostel_id"]):
            return ServiceResult.not_found("Hostel", str(data["hostel_id"]))
        return None


class OfficeExpenseService(BaseService[OfficeExpense, OfficeExpenseRepository]):
    entity_name = "Office expense"

    def __init__(self, repository: OfficeExpenseRepository, db_session: Session):
        super().__init__(repository, db_session)

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(data, monthly_total=office_monthly_total(data))

    def _prepare_update(self, entity: OfficeExpense, data: Dict[str, Any]) -> Dict[str, Any]:
        data = {k: v for k, v in data.items() if not (k in OFFICE_EXPENSE_LINES and v is None)}
        lines = {k: data.get(k, getattr(entity, k)) for k in OFFICE_EXPENSE_LINES}
        return dict(data, monthly_total=office_monthly_total(lines))


class StaffSalaryService(BaseService[StaffSalary, StaffSalaryRepository]):
    entity_name = "Staff salary"

    _AMOUNT_FIELDS = ("basic_salary", "allowances", "deductions")

    def __init__(self, repository: StaffSalaryRepository, db_session: Session):
        super().__init__(repository, db_session)

    def _validate_update(self, entity: StaffSalary, data: Dict[str, Any]) -> Optional[ServiceResult]:
        merged = {k: data.get(k) if data.get(k) is not None else getattr(entity, k) for k in self._AMOUNT_FIELDS}
        gross, net = salary_totals(merged["basic_salary"], merged["allowances"], merged["deductions"])
        if net < 0:
            return ServiceResult.validation_failure(
                "Deductions cannot exceed gross salary",
                field="deductions",
                details={"gross_salary": str(gross), "deductions": str(merged["deductions"])},
            )
        return None

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        gross, net = salary_totals(data.get("basic_salary"), data.get("allowances"), data.get("deductions"))
        return dict(data, gross_salary=gross, net_salary=net)

    def _prepare_update(self, entity: StaffSalary, data: Dict[str, Any]) -> Dict[str, Any]:
        data = {k: v for k, v in data.items() if not (k in self._AMOUNT_FIELDS and v is None)}
        merged = {k: data.get(k, getattr(entity, k)) for k in self._AMOUNT_FIELDS}
        gross, net = salary_totals(merged["basic_salary"], merged["allowances"], merged["deductions"])
        return dict(data, gross_salary=gross, net_salary=net)


class PersonalExpenseService(BaseService[PersonalExpense, PersonalExpenseRepository]):
    entity_name = "Personal expense"

    def __init__(self, repository: PersonalExpenseRepository, db_session: Session):
        super().__init__(repository, db_session)
