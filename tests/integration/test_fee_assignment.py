from datetime import date, timedelta
from decimal import Decimal

from backoffice.config.settings import ReassignmentPolicy
from backoffice.core.exceptions import ErrorCode
from backoffice.models import FeePayment, StudentFeeAssignment, StudentFeeCustomization
from backoffice.models.base import PaymentStatus
from backoffice.repositories import StudentFeeAssignmentRepository
from backoffice.schemas.fee_structure import FeeAssignmentRequest, StudentSelection
from backoffice.services.fee_structure import FeeAssignmentService


def _service(db, policy=ReassignmentPolicy.SKIP):
    return FeeAssignmentService(StudentFeeAssignmentRepository(db), db, reassignment_policy=policy)


def _request(catalog, **selection):
    return FeeAssignmentRequest(
        fee_structure_id=catalog.structure.id,
        selection=StudentSelection(**selection),
    )


def test_assign_by_batch_and_course_creates_one_row_per_component(db, catalog):
    result = _service(db).assign(
        _request(catalog, course_id=catalog.bba.id, academic_session_id=catalog.batch.id),
        as_of=date(2024, 7, 1),
    )

    assert result.is_success, result.error
    assert result.data.student_count == 2
    assert result.data.created_count == 4
    assert result.data.skipped_count == 0

    rows = db.query(FeePayment).filter(FeePayment.student_id == catalog.asha.id).all()
    assert sorted(r.amount_due for r in rows) == [Decimal("2000.00"), Decimal("15000.00")]
    for row in rows:
        assert row.amount_paid == Decimal("0.00")
        assert row.payment_status == PaymentStatus.PENDING
        assert row.due_date == date(2024, 7, 1) + timedelta(days=30)

    assert db.query(FeePayment).filter(FeePayment.student_id == catalog.meera.id).count() == 0
    assert db.query(StudentFeeAssignment).count() == 2


def test_explicit_due_date_and_student_ids(db, catalog):
    request = FeeAssignmentRequest(
        fee_structure_id=catalog.structure.id,
        selection=StudentSelection(student_ids=[catalog.meera.id]),
        due_date=date(2024, 8, 15),
    )
    result = _service(db).assign(request)

    assert result.is_success
    assert result.data.created_count == 2
    due_dates = {r.due_date for r in db.query(FeePayment).all()}
    assert due_dates == {date(2024, 8, 15)}


def test_name_filter_matches_substring(db, catalog):
    result = _service(db).assign(_request(catalog, name="vikr"))

    assert result.is_success
    assert result.data.student_count == 1
    assert {r.student_id for r in db.query(FeePayment).all()} == {catalog.vikram.id}


def test_name_filter_treats_wildcards_literally(db, catalog):
    result = _service(db).assign(_request(catalog, name="%"))

    assert result.error.code == ErrorCode.EMPTY_SELECTION
    assert db.query(FeePayment).count() == 0


def test_reassignment_is_skipped_by_default(db, catalog):
    service = _service(db)
    service.assign(_request(catalog, course_id=catalog.bba.id))

    again = service.assign(_request(catalog, course_id=catalog.bba.id))

    assert again.is_success
    assert again.data.created_count == 0
    assert again.data.skipped_count == 4
    assert db.query(FeePayment).count() == 4
    assert db.query(StudentFeeAssignment).count() == 2


def test_reassignment_error_policy_rejects_request(db, catalog):
    _service(db).assign(_request(catalog, course_id=catalog.bba.id))

    result = _service(db, ReassignmentPolicy.ERROR).assign(_request(catalog, course_id=catalog.bba.id))

    assert not result.is_success
    assert result.error.code == ErrorCode.ALREADY_ASSIGNED
    assert db.query(FeePayment).count() == 4


def test_reassignment_duplicate_policy_inserts_again(db, catalog):
    _service(db).assign(_request(catalog, student_ids=[catalog.asha.id]))

    result = _service(db, ReassignmentPolicy.DUPLICATE).assign(_request(catalog, student_ids=[catalog.asha.id]))

    assert result.is_success
    assert result.data.created_count == 2
    assert db.query(FeePayment).count() == 4
    assert db.query(StudentFeeAssignment).count() == 1


def test_customization_sets_amount_due_on_new_rows(db, catalog):
    db.add(
        StudentFeeCustomization(
            student_id=catalog.asha.id,
            fee_structure_component_id=catalog.tuition_component.id,
            custom_amount=Decimal("12000.00"),
            reason="Scholarship",
        )
    )
    db.commit()

    _service(db).assign(_request(catalog, course_id=catalog.bba.id))

    asha_tuition = (
        db.query(FeePayment)
        .filter_by(student_id=catalog.asha.id, fee_structure_component_id=catalog.tuition_component.id)
        .one()
    )
    vikram_tuition = (
        db.query(FeePayment)
        .filter_by(student_id=catalog.vikram.id, fee_structure_component_id=catalog.tuition_component.id)
        .one()
    )
    assert asha_tuition.amount_due == Decimal("12000.00")
    assert vikram_tuition.amount_due == Decimal("15000.00")


def test_empty_selection_is_rejected_without_writes(db, catalog):
    result = _service(db).assign(_request(catalog))

    assert not result.is_success
    assert result.error.code == ErrorCode.EMPTY_SELECTION
    assert db.query(FeePayment).count() == 0


def test_selection_matching_nobody_is_rejected(db, catalog):
    result = _service(db).assign(_request(catalog, student_ids=[]))

    assert not result.is_success
    assert result.error.code == ErrorCode.EMPTY_SELECTION


def test_inactive_structure_is_rejected(db, catalog):
    catalog.structure.is_active = False
    db.commit()

    result = _service(db).assign(_request(catalog, course_id=catalog.bba.id))

    assert not result.is_success
    assert result.error.code == ErrorCode.INACTIVE_FEE_STRUCTURE
    assert db.query(FeePayment).count() == 0


def test_inactive_fee_type_is_rejected(db, catalog):
    catalog.admission.is_active = False
    db.commit()

    result = _service(db).assign(_request(catalog, course_id=catalog.bba.id))

    assert not result.is_success
    assert result.error.code == ErrorCode.INACTIVE_FEE_STRUCTURE
    assert "Admission Fee" in result.error.message


def test_failed_write_leaves_no_partial_rows(db, catalog, monkeypatch):
    service = _service(db)

    def broken_create_many(entities, commit=True):
        raise RuntimeError("disk full")

    # ledger rows are flushed first, then the assignment records fail
    monkeypatch.setattr(service.repository, "create_many", broken_create_many)

    result = service.assign(_request(catalog, course_id=catalog.bba.id))

    assert not result.is_success
    assert result.error.code == ErrorCode.INTERNAL_ERROR
    assert db.query(FeePayment).count() == 0
    assert db.query(StudentFeeAssignment).count() == 0
