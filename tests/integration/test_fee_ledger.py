from datetime import date
from decimal import Decimal

import pytest

from backoffice.core.exceptions import ErrorCode
from backoffice.models import FeePayment, StudentFeeCustomization
from backoffice.models.base import FeeFrequency, PaymentStatus
from backoffice.repositories import FeePaymentRepository, FeeStructureRepository, StudentFeeAssignmentRepository
from backoffice.schemas.fee_structure import FeeAssignmentRequest, FeeStructureComponentUpdate, StudentSelection
from backoffice.services.fee_structure import FeeAssignmentService, FeeStructureService
from backoffice.services.payment import FeeLedgerService


@pytest.fixture
def assigned(db, catalog):
    FeeAssignmentService(StudentFeeAssignmentRepository(db), db).assign(
        FeeAssignmentRequest(
            fee_structure_id=catalog.structure.id,
            selection=StudentSelection(course_id=catalog.bba.id),
            due_date=date(2024, 7, 31),
        )
    )
    return catalog


@pytest.fixture
def ledger(db):
    return FeeLedgerService(FeePaymentRepository(db), db)


def _row(db, student, component):
    return db.query(FeePayment).filter_by(student_id=student.id, fee_structure_component_id=component.id).one()


def test_tuition_payment_sequence(db, assigned, ledger):
    row = _row(db, assigned.asha, assigned.tuition_component)
    assert row.amount_due == Decimal("15000.00")
    assert row.payment_status == PaymentStatus.PENDING

    paid = ledger.update_payment(row.id, Decimal("15000"), as_of=date(2024, 8, 2))
    assert paid.is_success
    assert paid.data.payment_status == PaymentStatus.PAID
    assert paid.data.last_payment_date == date(2024, 8, 2)

    partial = ledger.update_payment(row.id, Decimal("7000"), as_of=date(2024, 8, 3))
    assert partial.data.payment_status == PaymentStatus.PARTIAL
    assert partial.data.amount_paid == Decimal("7000.00")
    assert partial.data.balance == Decimal("8000.00")

    reset = ledger.update_payment(row.id, Decimal("0"), as_of=date(2024, 8, 4))
    assert reset.data.payment_status == PaymentStatus.PENDING
    # a zero amount is not a payment
    assert reset.data.last_payment_date == date(2024, 8, 3)


def test_negative_amount_is_rejected(db, assigned, ledger):
    row = _row(db, assigned.asha, assigned.tuition_component)

    result = ledger.update_payment(row.id, Decimal("-1"))

    assert not result.is_success
    assert result.error.code == ErrorCode.VALIDATION_ERROR
    db.refresh(row)
    assert row.amount_paid == Decimal("0.00")


def test_unknown_payment_is_not_found(ledger, assigned):
    from uuid import uuid4

    result = ledger.update_payment(uuid4(), Decimal("10"))
    assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND


def test_each_write_increments_version(db, assigned, ledger):
    row = _row(db, assigned.asha, assigned.tuition_component)
    assert row.version == 1

    result = ledger.update_payment(row.id, Decimal("500"), expected_version=1)

    assert result.is_success
    assert result.data.version == 2


def test_stale_expected_version_is_a_conflict(db, assigned, ledger):
    row = _row(db, assigned.asha, assigned.tuition_component)
    ledger.update_payment(row.id, Decimal("500"), expected_version=1)

    result = ledger.update_payment(row.id, Decimal("900"), expected_version=1)

    assert not result.is_success
    assert result.error.code == ErrorCode.CONCURRENT_MODIFICATION
    assert result.error.details["actual_version"] == 2
    db.refresh(row)
    assert row.amount_paid == Decimal("500.00")


def test_concurrent_stale_flush_is_a_conflict(db, session_factory, assigned):
    payment_id = _row(db, assigned.asha, assigned.tuition_component).id

    first = session_factory()
    second = session_factory()
    try:
        first_ledger = FeeLedgerService(FeePaymentRepository(first), first)
        second_ledger = FeeLedgerService(FeePaymentRepository(second), second)

        # both sessions hold version 1; the identity map keeps only referenced rows
        first_copy = first.get(FeePayment, payment_id)
        second_copy = second.get(FeePayment, payment_id)
        assert first_copy.version == second_copy.version == 1

        assert second_ledger.update_payment(payment_id, Decimal("3000")).is_success
        result = first_ledger.update_payment(payment_id, Decimal("4000"))

        assert not result.is_success
        assert result.error.code == ErrorCode.CONCURRENT_MODIFICATION
    finally:
        first.close()
        second.close()

    db.expire_all()
    assert db.get(FeePayment, payment_id).amount_paid == Decimal("3000.00")


def test_custom_amount_only_changes_one_student(db, assigned, ledger):
    asha_row = _row(db, assigned.asha, assigned.tuition_component)
    ledger.update_payment(asha_row.id, Decimal("7000"))

    result = ledger.apply_custom_amount(
        assigned.asha.id,
        assigned.tuition_component.id,
        Decimal("5000"),
        reason="Merit scholarship",
    )

    assert result.is_success, result.error
    assert result.metadata["updated_rows"] == 1

    db.expire_all()
    asha_row = _row(db, assigned.asha, assigned.tuition_component)
    vikram_row = _row(db, assigned.vikram, assigned.tuition_component)
    assert asha_row.amount_due == Decimal("5000.00")
    assert asha_row.payment_status == PaymentStatus.PAID
    assert vikram_row.amount_due == Decimal("15000.00")
    assert vikram_row.payment_status == PaymentStatus.PENDING


def test_custom_amount_is_upserted(db, assigned, ledger):
    ledger.apply_custom_amount(assigned.asha.id, assigned.admission_component.id, Decimal("1500"))
    ledger.apply_custom_amount(assigned.asha.id, assigned.admission_component.id, Decimal("1000"), reason="Revised")

    customizations = db.query(StudentFeeCustomization).all()
    assert len(customizations) == 1
    assert customizations[0].custom_amount == Decimal("1000.00")
    assert customizations[0].reason == "Revised"


def test_negative_custom_amount_is_rejected(db, assigned, ledger):
    result = ledger.apply_custom_amount(assigned.asha.id, assigned.tuition_component.id, Decimal("-5"))

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert db.query(StudentFeeCustomization).count() == 0


def test_one_time_charges_list_overrides(db, assigned, ledger):
    ledger.apply_custom_amount(assigned.vikram.id, assigned.admission_component.id, Decimal("500"))

    result = ledger.list_one_time_charges()

    assert result.is_success
    entries = {e.student_name: e for e in result.data}
    assert set(entries) == {"Asha Rao", "Vikram Singh"}
    assert entries["Asha Rao"].custom_amount is None
    assert entries["Asha Rao"].amount_due == Decimal("2000.00")
    assert entries["Vikram Singh"].custom_amount == Decimal("500.00")
    assert entries["Vikram Singh"].standard_amount == Decimal("2000.00")
    assert all(e.fee_type == "Admission Fee" for e in result.data)


def test_list_for_student_orders_by_due_date(db, assigned, ledger):
    rows = ledger.list_for_student(assigned.asha.id).data
    assert len(rows) == 2
    assert all(r.due_date == date(2024, 7, 31) for r in rows)

    ledger.update_payment(_row(db, assigned.asha, assigned.admission_component).id, Decimal("2000"))
    unpaid = ledger.list_for_student(assigned.asha.id, unpaid_only=True).data
    assert [r.fee_structure_component_id for r in unpaid] == [assigned.tuition_component.id]


def test_repricing_a_component_updates_rows_without_customization(db, assigned, ledger):
    vikram_row = _row(db, assigned.vikram, assigned.tuition_component)
    ledger.update_payment(vikram_row.id, Decimal("12000"))
    ledger.apply_custom_amount(assigned.asha.id, assigned.tuition_component.id, Decimal("5000"))
    structures = FeeStructureService(FeeStructureRepository(db), db)

    result = structures.update_component(
        assigned.tuition_component.id, FeeStructureComponentUpdate(amount=Decimal("12000"))
    )

    assert result.is_success, result.error
    assert result.metadata["updated_rows"] == 1
    db.expire_all()
    vikram_row = _row(db, assigned.vikram, assigned.tuition_component)
    assert vikram_row.amount_due == Decimal("12000.00")
    assert vikram_row.payment_status == PaymentStatus.PAID
    asha_row = _row(db, assigned.asha, assigned.tuition_component)
    assert asha_row.amount_due == Decimal("5000.00")
    assert asha_row.payment_status == PaymentStatus.PENDING
    assert _row(db, assigned.vikram, assigned.admission_component).amount_due == Decimal("2000.00")


def test_frequency_change_leaves_ledger_amounts_alone(db, assigned):
    structures = FeeStructureService(FeeStructureRepository(db), db)

    result = structures.update_component(
        assigned.tuition_component.id, FeeStructureComponentUpdate(frequency=FeeFrequency.MONTHLY)
    )

    assert result.is_success, result.error
    assert result.metadata["updated_rows"] == 0
    db.expire_all()
    assert _row(db, assigned.asha, assigned.tuition_component).amount_due == Decimal("15000.00")
