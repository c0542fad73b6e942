"""Hostels and the four expense ledgers."""

from fastapi import APIRouter

from backoffice.api import deps
from backoffice.api.v1.crud import create_crud_router
from backoffice.schemas.expense import (
    HostelCreate,
    HostelExpenseCreate,
    HostelExpenseResponse,
    HostelExpenseUpdate,
    HostelResponse,
    HostelUpdate,
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

router = APIRouter()

_RESOURCES = (
    ("/hostels", "Hostel", deps.get_hostel_service,
     HostelCreate, HostelUpdate, HostelResponse, ("university_id", "status")),
    ("/hostel-expenses", "Hostel expense", deps.get_hostel_expense_service,
     HostelExpenseCreate, HostelExpenseUpdate, HostelExpenseResponse, ("hostel_id", "status", "category")),
    ("/office-expenses", "Office expense", deps.get_office_expense_service,
     OfficeExpenseCreate, OfficeExpenseUpdate, OfficeExpenseResponse, ("location", "month")),
    ("/salaries", "Staff salary", deps.get_staff_salary_service,
     StaffSalaryCreate, StaffSalaryUpdate, StaffSalaryResponse, ("payment_status",)),
    ("/personal-expenses", "Personal expense", deps.get_personal_expense_service,
     PersonalExpenseCreate, PersonalExpenseUpdate, PersonalExpenseResponse, ("category",)),
)

for prefix, name, get_service, create_schema, update_schema, response_schema, filters in _RESOURCES:
    router.include_router(
        create_crud_router(
            entity_name=name,
            get_service=get_service,
            create_schema=create_schema,
            update_schema=update_schema,
            response_schema=response_schema,
            filter_fields=filters,
        ),
        prefix=prefix,
        tags=["Expenses"],
    )
