"""
Fee ledger rules.

Pure functions shared by the ledger service and the reports; they never
touch the database.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from backoffice.models.base import AlertSeverity, PaymentStatus

ZERO = Decimal("0")


def derive_payment_status(amount_due: Decimal, amount_paid: Decimal) -> PaymentStatus:
    """
    Status of a ledger row.

    Evaluated in order: nothing paid is pending, paid in full (or over)
    is paid, anything in between is partial.
    """
    amount_due = Decimal(amount_due or ZERO)
    amount_paid = Decimal(amount_paid or ZERO)

    if amount_paid == ZERO:
        return PaymentStatus.PENDING
    if amount_paid >= amount_due:
        return PaymentStatus.PAID
    return PaymentStatus.PARTIAL


def days_overdue(due_date: Optional[Date], as_of: Date) -> int:
    """Whole days past due; 0 when undated or not yet due."""
    if due_date is None:
        return 0
    return max(0, (as_of - due_date).days)


def alert_severity(overdue_days: int, threshold_days: int) -> AlertSeverity:
    if overdue_days > threshold_days:
        return AlertSeverity.DESTRUCTIVE
    return AlertSeverity.SECONDARY
