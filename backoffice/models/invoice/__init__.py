"""Invoice models."""

from backoffice.models.invoice.invoice import Invoice

__all__ = ["Invoice"]
