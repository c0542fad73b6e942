"""Fee ledger services and rules."""

from backoffice.services.payment.fee_ledger_service import FeeLedgerService
from backoffice.services.payment.payment_rules import alert_severity, days_overdue, derive_payment_status

__all__ = ["FeeLedgerService", "alert_severity", "days_overdue", "derive_payment_status"]
