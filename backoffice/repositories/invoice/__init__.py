"""Invoice repositories."""

from backoffice.repositories.invoice.invoice_repository import InvoiceRepository

__all__ = ["InvoiceRepository"]
