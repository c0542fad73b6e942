from datetime import date
from decimal import Decimal

from backoffice.models import Invoice, NumberSequence
from backoffice.repositories import NumberSequenceRepository
from backoffice.services.numbering import NumberingService

# 1700000123.5 s -> ...123500 ms
FIXED_CLOCK = 1700000123.5


def _numbering(db, clock=lambda: FIXED_CLOCK):
    return NumberingService(NumberSequenceRepository(db), db, clock=clock)


def test_admission_number_skips_numbers_already_in_use(db, catalog):
    numbering = _numbering(db)

    assert numbering.generate_admission_number(2024).data == "ADM20240004"
    assert numbering.generate_admission_number(2024).data == "ADM20240005"


def test_admission_sequence_is_per_year(db, catalog):
    numbering = _numbering(db)

    assert numbering.generate_admission_number(2025).data == "ADM20250001"
    assert db.query(NumberSequence).filter_by(prefix="ADM", period="2025").one().last_value == 1


def test_receipt_numbers_count_per_day(db):
    numbering = _numbering(db)

    assert numbering.generate_receipt_number(date(2024, 6, 1)).data == "RCP202406010001"
    assert numbering.generate_receipt_number(date(2024, 6, 1)).data == "RCP202406010002"
    assert numbering.generate_receipt_number(date(2024, 6, 2)).data == "RCP202406020001"


def test_invoice_number_from_clock(db):
    assert _numbering(db).allocate_invoice_number() == "INV-123500"


def test_invoice_number_advances_past_collisions(db):
    for number in ("INV-123500", "INV-123501"):
        db.add(Invoice(
            invoice_number=number,
            invoice_date=date(2024, 1, 1),
            subtotal=Decimal("1"),
            total_amount=Decimal("1"),
        ))
    db.commit()

    assert _numbering(db).allocate_invoice_number() == "INV-123502"

