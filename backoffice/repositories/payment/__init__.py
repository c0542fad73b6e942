"""Fee ledger repositories."""

from backoffice.repositories.payment.fee_payment_repository import FeePaymentRepository

__all__ = ["FeePaymentRepository"]
