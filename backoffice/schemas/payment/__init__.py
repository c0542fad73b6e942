"""Fee ledger schemas."""

from backoffice.schemas.payment.fee_payment import FeePaymentResponse, PaymentUpdateRequest

__all__ = ["FeePaymentResponse", "PaymentUpdateRequest"]
