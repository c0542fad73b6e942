"""Fee ledger models."""

from backoffice.models.payment.fee_payment import FeePayment

__all__ = ["FeePayment"]
