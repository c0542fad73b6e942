from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest

from backoffice.core.exceptions import ValidationError
from backoffice.models.base import PaymentStatus
from backoffice.services.reporting import export_filename, render_csv


def test_header_and_one_line_per_row():
    rows = [
        {"name": "Bright Futures", "student_count": 2, "total_due": Decimal("34000.00")},
        {"name": "Open Doors", "student_count": 0, "total_due": Decimal("0.00")},
    ]
    text = render_csv(rows)

    lines = text.splitlines()
    assert len(lines) == len(rows) + 1
    assert lines[0] == '"name","student_count","total_due"'
    assert lines[1] == '"Bright Futures",2,34000.00'
    assert text.endswith("\n")


def test_values_are_rendered_as_text_or_bare_numbers():
    rows = [
        {
            "id": UUID("12345678-1234-5678-1234-567812345678"),
            "due_date": date(2024, 3, 1),
            "status": PaymentStatus.PARTIAL,
            "margin": 12.5,
            "note": 'He said "hi", then left',
        }
    ]
    line = render_csv(rows).splitlines()[1]
    assert line == (
        '"12345678-1234-5678-1234-567812345678","2024-03-01","partial",12.5,'
        '"He said ""hi"", then left"'
    )


def test_empty_report_cannot_be_exported():
    with pytest.raises(ValidationError) as exc_info:
        render_csv([])
    assert exc_info.value.message == "No data available to export"


def test_export_filename():
    assert export_filename("due-payments", date(2024, 5, 17)) == "due-payments-2024-05-17.csv"
