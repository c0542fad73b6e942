"""Invoice services."""

from backoffice.services.invoice.invoice_calculator import calculate_totals
from backoffice.services.invoice.invoice_service import InvoiceService

__all__ = ["InvoiceService", "calculate_totals"]
