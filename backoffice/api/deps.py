"""
FastAPI dependencies: the database session and one factory per service.

Example usage in a router:

    from fastapi import Depends, APIRouter
    from backoffice.api import deps

    @router.get("/{fee_type_id}")
    def get_fee_type(fee_type_id: UUID, service=Depends(deps.get_fee_type_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from backoffice.db.session import get_db
from backoffice.repositories import (
    AcademicSessionRepository,
    AgentRepository,
    CourseRepository,
    FeePaymentRepository,
    FeeStructureRepository,
    FeeTypeRepository,
    HostelExpenseRepository,
    HostelRepository,
    InvoiceRepository,
    NumberSequenceRepository,
    OfficeExpenseRepository,
    PersonalExpenseRepository,
    ReportAggregateRepository,
    StaffSalaryRepository,
    StudentFeeAssignmentRepository,
    StudentRepository,
    UniversityRepository,
)
from backoffice.services.academic import AcademicSessionService, CourseService, UniversityService
from backoffice.services.expense import (
    HostelExpenseService,
    HostelService,
    OfficeExpenseService,
    PersonalExpenseService,
    StaffSalaryService,
)
from backoffice.services.fee_structure import FeeAssignmentService, FeeStructureService, FeeTypeService
from backoffice.services.invoice import InvoiceService
from backoffice.services.numbering import NumberingService
from backoffice.services.payment import FeeLedgerService
from backoffice.services.reporting import ReportService
from backoffice.services.student import AgentService, StudentService


# --- Academic ------------------------------------------------------------------

def get_university_service(db: Session = Depends(get_db)) -> UniversityService:
    return UniversityService(UniversityRepository(db), db)


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(CourseRepository(db), db)


def get_academic_session_service(db: Session = Depends(get_db)) -> AcademicSessionService:
    return AcademicSessionService(AcademicSessionRepository(db), db)


# --- Students & agents ---------------------------------------------------------

def get_agent_service(db: Session = Depends(get_db)) -> AgentService:
    return AgentService(AgentRepository(db), db)


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(StudentRepository(db), db)


# --- Fees ----------------------------------------------------------------------

def get_fee_type_service(db: Session = Depends(get_db)) -> FeeTypeService:
    return FeeTypeService(FeeTypeRepository(db), db)


def get_fee_structure_service(db: Session = Depends(get_db)) -> FeeStructureService:
    return FeeStructureService(FeeStructureRepository(db), db)


def get_fee_assignment_service(db: Session = Depends(get_db)) -> FeeAssignmentService:
    """Reassignment policy and default due days come from Settings."""
    return FeeAssignmentService(StudentFeeAssignmentRepository(db), db)


def get_fee_ledger_service(db: Session = Depends(get_db)) -> FeeLedgerService:
    return FeeLedgerService(FeePaymentRepository(db), db)


# --- Expenses ------------------------------------------------------------------

def get_hostel_service(db: Session = Depends(get_db)) -> HostelService:
    return HostelService(HostelRepository(db), db)


def get_hostel_expense_service(db: Session = Depends(get_db)) -> HostelExpenseService:
    return HostelExpenseService(HostelExpenseRepository(db), db)


def get_office_expense_service(db: Session = Depends(get_db)) -> OfficeExpenseService:
    return OfficeExpenseService(OfficeExpenseRepository(db), db)


def get_staff_salary_service(db: Session = Depends(get_db)) -> StaffSalaryService:
    return StaffSalaryService(StaffSalaryRepository(db), db)


def get_personal_expense_service(db: Session = Depends(get_db)) -> PersonalExpenseService:
    return PersonalExpenseService(PersonalExpenseRepository(db), db)


# --- Reporting, invoices, numbering -------------------------------------------

def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(ReportAggregateRepository(db), db)


def get_numbering_service(db: Session = Depends(get_db)) -> NumberingService:
    return NumberingService(NumberSequenceRepository(db), db)


def get_invoice_service(
    db: Session = Depends(get_db),
    numbering: NumberingService = Depends(get_numbering_service),
) -> InvoiceService:
    return InvoiceService(InvoiceRepository(db), db, numbering=numbering)


__all__ = [
    "get_db",
    "get_university_service",
    "get_course_service",
    "get_academic_session_service",
    "get_agent_service",
    "get_student_service",
    "get_fee_type_service",
    "get_fee_structure_service",
    "get_fee_assignment_service",
    "get_fee_ledger_service",
    "get_hostel_service",
    "get_hostel_expense_service",
    "get_office_expense_service",
    "get_staff_salary_service",
    "get_personal_expense_service",
    "get_report_service",
    "get_numbering_service",
    "get_invoice_service",
]
