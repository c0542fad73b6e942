"""Numbering schemas."""

from backoffice.schemas.numbering.numbering import GeneratedNumber, ReceiptNumberRequest

__all__ = ["GeneratedNumber", "ReceiptNumberRequest"]
