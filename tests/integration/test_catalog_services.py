from datetime import date
from decimal import Decimal
from uuid import uuid4

from backoffice.core.exceptions import ErrorCode
from backoffice.models import FeePayment
from backoffice.models.base import CommissionPaymentStatus, FeeFrequency, PaymentStatus
from backoffice.repositories import (
    AgentRepository,
    FeeStructureRepository,
    FeeTypeRepository,
    HostelExpenseRepository,
    HostelRepository,
    OfficeExpenseRepository,
    StaffSalaryRepository,
    StudentRepository,
)
from backoffice.schemas.expense import (
    HostelCreate,
    HostelExpenseCreate,
    OfficeExpenseCreate,
    OfficeExpenseUpdate,
    StaffSalaryCreate,
    StaffSalaryUpdate,
)
from backoffice.schemas.fee_structure import FeeStructureComponentCreate, FeeStructureCreate, FeeTypeCreate
from backoffice.schemas.student import StudentCreate, StudentUpdate
from backoffice.services.expense import HostelExpenseService, HostelService, OfficeExpenseService, StaffSalaryService
from backoffice.services.fee_structure import FeeStructureService, FeeTypeService
from backoffice.services.student import AgentService, StudentService


class TestFeeTypes:
    def test_duplicate_name_is_rejected(self, db, catalog):
        service = FeeTypeService(FeeTypeRepository(db), db)

        result = service.create(FeeTypeCreate(name="Tuition Fee", amount=Decimal("100")))

        assert result.error.code == ErrorCode.DUPLICATE_ENTRY

    def test_type_used_by_a_structure_cannot_be_deleted(self, db, catalog):
        service = FeeTypeService(FeeTypeRepository(db), db)

        result = service.delete(catalog.tuition.id)

        assert result.error.code == ErrorCode.RESOURCE_IN_USE
        assert result.error.details["component_count"] == 1

    def test_unused_type_can_be_deleted(self, db, catalog):
        service = FeeTypeService(FeeTypeRepository(db), db)
        library = service.create(FeeTypeCreate(name="Library Fee", amount=Decimal("750"))).data

        assert service.delete(library.id).data is True
        assert service.get_by_id(library.id).error.code == ErrorCode.RESOURCE_NOT_FOUND


class TestFeeStructures:
    def test_components_default_to_catalog_amounts(self, db, catalog):
        service = FeeStructureService(FeeStructureRepository(db), db)

        result = service.create_structure(
            FeeStructureCreate(
                name="MBA 2024",
                university_id=catalog.lakeside.id,
                course_id=catalog.mba.id,
                components=[
                    FeeStructureComponentCreate(fee_type_id=catalog.tuition.id),
                    FeeStructureComponentCreate(fee_type_id=catalog.admission.id, amount=Decimal("2500")),
                ],
            )
        )

        assert result.is_success, result.error
        amounts = sorted((c.amount, c.frequency) for c in result.data.components)
        assert amounts == [
            (Decimal("2500.00"), FeeFrequency.ONE_TIME),
            (Decimal("15000.00"), FeeFrequency.YEARLY),
        ]

    def test_unknown_fee_type_creates_nothing(self, db, catalog):
        service = FeeStructureService(FeeStructureRepository(db), db)

        result = service.create_structure(
            FeeStructureCreate(
                name="Broken",
                university_id=catalog.lakeside.id,
                course_id=catalog.mba.id,
                components=[FeeStructureComponentCreate(fee_type_id=uuid4())],
            )
        )

        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert service.list_structures(course_id=catalog.mba.id).data == []

    def test_component_with_ledger_rows_cannot_be_removed(self, db, catalog):
        db.add(FeePayment(
            student_id=catalog.asha.id,
            fee_structure_component_id=catalog.tuition_component.id,
            amount_due=Decimal("15000"),
            payment_status=PaymentStatus.PENDING,
        ))
        db.commit()
        service = FeeStructureService(FeeStructureRepository(db), db)

        assert service.remove_component(catalog.tuition_component.id).error.code == ErrorCode.RESOURCE_IN_USE
        assert service.delete(catalog.structure.id).error.code == ErrorCode.RESOURCE_IN_USE
        assert service.remove_component(catalog.admission_component.id).is_success


class TestStudents:
    def _create(self, db, catalog, **overrides):
        payload = dict(
            first_name="Rohan",
            last_name="Das",
            university_id=catalog.northfield.id,
            course_id=catalog.bba.id,
            academic_session_id=catalog.batch.id,
        )
        payload.update(overrides)
        return StudentService(StudentRepository(db), db).create(StudentCreate(**payload))

    def test_admission_number_is_generated(self, db, catalog):
        result = self._create(db, catalog)

        assert result.is_success, result.error
        assert result.data.admission_number.startswith(f"ADM{date.today().year}")
        assert len(result.data.admission_number) == len("ADM") + 4 + 4

    def test_admission_number_must_be_unique(self, db, catalog):
        result = self._create(db, catalog, admission_number="ADM20240001")

        assert result.error.code == ErrorCode.DUPLICATE_ENTRY

    def test_unknown_course_is_not_found(self, db, catalog):
        result = self._create(db, catalog, course_id=uuid4())

        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert result.error.details["resource_type"] == "Course"

    def test_update_with_unknown_agent_is_not_found(self, db, catalog):
        service = StudentService(StudentRepository(db), db)

        result = service.update(catalog.asha.id, StudentUpdate(agent_id=uuid4()))

        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert result.error.details["resource_type"] == "Agent"
        db.refresh(catalog.asha)
        assert catalog.asha.agent_id == catalog.agent.id

    def test_financial_summary(self, db, catalog):
        db.add_all([
            FeePayment(student_id=catalog.asha.id, fee_structure_component_id=catalog.tuition_component.id,
                       amount_due=Decimal("15000"), amount_paid=Decimal("5000"),
                       payment_status=PaymentStatus.PARTIAL, due_date=date(2024, 9, 1)),
            FeePayment(student_id=catalog.asha.id, fee_structure_component_id=catalog.admission_component.id,
                       amount_due=Decimal("2000"), amount_paid=Decimal("2500"),
                       payment_status=PaymentStatus.PAID, due_date=date(2024, 8, 1)),
        ])
        db.commit()

        summary = StudentService(StudentRepository(db), db).get_financial_summary(catalog.asha.id).data

        assert summary.student_name == "Asha Rao"
        assert summary.total_fees == Decimal("17000.00")
        assert summary.paid_amount == Decimal("7500.00")
        # the overpaid admission row does not offset tuition
        assert summary.pending_amount == Decimal("10000.00")
        assert summary.next_payment_amount == Decimal("10000.00")
        assert summary.next_payment_date == date(2024, 9, 1)
        assert len(summary.upcoming_payments) == 1

    def test_financial_summary_without_ledger(self, db, catalog):
        summary = StudentService(StudentRepository(db), db).get_financial_summary(catalog.meera.id).data

        assert summary.total_fees == Decimal("0.00")
        assert summary.next_payment_amount is None
        assert summary.upcoming_payments == []


def test_agent_commission_status_toggle(db, catalog):
    service = AgentService(AgentRepository(db), db)
    assert catalog.agent.commission_payment_status == CommissionPaymentStatus.UNPAID

    result = service.set_commission_status(catalog.agent.id, CommissionPaymentStatus.PAID)

    assert result.data.commission_payment_status == CommissionPaymentStatus.PAID


class TestExpenses:
    def test_office_total_is_derived(self, db):
        service = OfficeExpenseService(OfficeExpenseRepository(db), db)

        created = service.create(OfficeExpenseCreate(
            location="Head Office",
            month="2024-03",
            expense_date=date(2024, 3, 31),
            rent=Decimal("20000"),
            utilities=Decimal("3500"),
            internet=Decimal("1500"),
            marketing=Decimal("5000"),
            travel=Decimal("0"),
            miscellaneous=Decimal("500"),
        )).data
        assert created.monthly_total == Decimal("30500.00")

        updated = service.update(created.id, OfficeExpenseUpdate(rent=Decimal("18000"))).data
        assert updated.monthly_total == Decimal("28500.00")

    def test_salary_gross_and_net_are_derived(self, db):
        service = StaffSalaryService(StaffSalaryRepository(db), db)

        created = service.create(StaffSalaryCreate(
            staff_name="Kiran",
            salary_month=date(2024, 3, 1),
            basic_salary=Decimal("40000"),
            allowances=Decimal("5000"),
            deductions=Decimal("3500"),
        )).data
        assert (created.gross_salary, created.net_salary) == (Decimal("45000.00"), Decimal("41500.00"))

        updated = service.update(created.id, StaffSalaryUpdate(allowances=Decimal("7000"))).data
        assert (updated.gross_salary, updated.net_salary) == (Decimal("47000.00"), Decimal("43500.00"))

    def test_salary_update_cannot_push_net_below_zero(self, db):
        service = StaffSalaryService(StaffSalaryRepository(db), db)
        created = service.create(StaffSalaryCreate(
            staff_name="Kiran",
            salary_month=date(2024, 3, 1),
            basic_salary=Decimal("1000"),
        )).data

        result = service.update(created.id, StaffSalaryUpdate(deductions=Decimal("1500")))

        assert result.error.code == ErrorCode.VALIDATION_ERROR

    def test_missing_parent_row_is_a_foreign_key_violation(self, db):
        hostel = HostelService(HostelRepository(db), db).create(
            HostelCreate(name="Sunrise Hostel", location="North Campus")
        ).data
        service = HostelExpenseService(HostelExpenseRepository(db), db)
        expense = service.create(HostelExpenseCreate(
            hostel_id=hostel.id,
            expense_type="Repairs",
            amount=Decimal("1200"),
            expense_date=date(2024, 3, 5),
        )).data

        result = service.update(expense.id, {"hostel_id": uuid4()})

        assert result.error.code == ErrorCode.FOREIGN_KEY_VIOLATION
        db.expire_all()
        assert service.get_by_id(expense.id).data.hostel_id == hostel.id
