from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from backoffice.core.exceptions import ErrorCode
from backoffice.models.base import DiscountType, InvoiceStatus
from backoffice.repositories import InvoiceRepository, NumberSequenceRepository
from backoffice.schemas.invoice import InvoiceItemInput, InvoiceRequest
from backoffice.services.invoice import InvoiceService
from backoffice.services.numbering import NumberingService


@pytest.fixture
def invoices(db):
    numbering = NumberingService(NumberSequenceRepository(db), db, clock=lambda: 1700000042.0)
    return InvoiceService(InvoiceRepository(db), db, numbering=numbering)


def _request(**overrides):
    payload = dict(
        items=[InvoiceItemInput(description="Consulting", amount=Decimal("1000"))],
        discount=Decimal("10"),
        gst_percentage=Decimal("18"),
    )
    payload.update(overrides)
    return InvoiceRequest(**payload)


def test_preview_persists_nothing(db, invoices):
    totals = invoices.preview(_request()).data

    assert totals.subtotal == Decimal("1000.00")
    assert totals.discount_amount == Decimal("100.00")
    assert totals.gst_amount == Decimal("162.00")
    assert totals.total_amount == Decimal("1062.00")
    assert invoices.list_invoices().data == []


def test_create_invoice(db, catalog, invoices):
    result = invoices.create_invoice(_request(student_id=catalog.asha.id, invoice_date=date(2024, 5, 1)))

    assert result.is_success, result.error
    invoice = result.data
    assert invoice.invoice_number == "INV-042000"
    assert invoice.total_amount == Decimal("1062.00")
    assert invoice.due_date == date(2024, 5, 1) + timedelta(days=30)
    assert invoice.status == InvoiceStatus.UNPAID
    assert invoice.items[0]["description"] == "Consulting"


def test_second_invoice_gets_next_number(db, invoices):
    first = invoices.create_invoice(_request()).data
    second = invoices.create_invoice(_request()).data

    assert (first.invoice_number, second.invoice_number) == ("INV-042000", "INV-042001")


def test_items_can_be_priced_from_fee_types(db, catalog, invoices):
    request = _request(
        items=[InvoiceItemInput(fee_type_id=catalog.admission.id, quantity=2)],
        discount=Decimal("500"),
        discount_type=DiscountType.FIXED,
        apply_gst=False,
    )

    invoice = invoices.create_invoice(request).data

    assert invoice.items[0]["description"] == "Admission Fee"
    assert invoice.subtotal == Decimal("4000.00")
    assert invoice.gst_amount == Decimal("0.00")
    assert invoice.gst_percentage == Decimal("0.00")
    assert invoice.total_amount == Decimal("3500.00")


def test_default_gst_rate_applies(db, invoices):
    totals = invoices.preview(_request(gst_percentage=None, discount=Decimal("0"))).data

    assert totals.gst_amount == Decimal("180.00")


def test_item_without_amount_is_rejected(db, invoices):
    result = invoices.preview(_request(items=[InvoiceItemInput(description="Mystery")]))

    assert result.error.code == ErrorCode.VALIDATION_ERROR


def test_unknown_student_is_rejected(db, invoices):
    result = invoices.create_invoice(_request(student_id=uuid4()))

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert result.error.field == "student_id"


def test_due_date_before_invoice_date_is_rejected(db, invoices):
    result = invoices.create_invoice(_request(invoice_date=date(2024, 5, 1), due_date=date(2024, 4, 1)))

    assert result.error.code == ErrorCode.VALIDATION_ERROR


def test_status_toggle_and_filter(db, catalog, invoices):
    invoice = invoices.create_invoice(_request(student_id=catalog.asha.id)).data
    invoices.create_invoice(_request())

    assert invoices.set_status(invoice.id, InvoiceStatus.PAID).data.status == InvoiceStatus.PAID
    paid = invoices.list_invoices(status=InvoiceStatus.PAID).data
    assert [i.id for i in paid] == [invoice.id]
    assert len(invoices.list_invoices(student_id=catalog.asha.id).data) == 1
