from datetime import date
from decimal import Decimal

import pytest

from backoffice.models.base import AlertSeverity, PaymentStatus
from backoffice.services.payment import alert_severity, days_overdue, derive_payment_status


@pytest.mark.parametrize(
    "due, paid, expected",
    [
        ("15000", "0", PaymentStatus.PENDING),
        ("15000", "7000", PaymentStatus.PARTIAL),
        ("15000", "15000", PaymentStatus.PAID),
        ("15000", "16000", PaymentStatus.PAID),
        # nothing paid wins over nothing due
        ("0", "0", PaymentStatus.PENDING),
    ],
)
def test_derive_payment_status(due, paid, expected):
    assert derive_payment_status(Decimal(due), Decimal(paid)) == expected


def test_days_overdue_is_clamped_at_zero():
    as_of = date(2024, 3, 31)
    assert days_overdue(date(2024, 3, 1), as_of) == 30
    assert days_overdue(date(2024, 4, 15), as_of) == 0
    assert days_overdue(None, as_of) == 0


def test_alert_severity_threshold_is_exclusive():
    assert alert_severity(30, 30) == AlertSeverity.SECONDARY
    assert alert_severity(31, 30) == AlertSeverity.DESTRUCTIVE
    assert alert_severity(0, 30) == AlertSeverity.SECONDARY
