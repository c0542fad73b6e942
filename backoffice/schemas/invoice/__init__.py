"""Invoice schemas."""

from backoffice.schemas.invoice.invoice import (
    InvoiceItemInput,
    InvoiceLineItem,
    InvoiceRequest,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceTotals,
)

__all__ = [
    "InvoiceItemInput",
    "InvoiceLineItem",
    "InvoiceRequest",
    "InvoiceResponse",
    "InvoiceStatusUpdate",
    "InvoiceTotals",
]
