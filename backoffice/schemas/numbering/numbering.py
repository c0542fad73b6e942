"""
Generated document number schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import Optional

from backoffice.schemas.common.base import BaseSchema

__all__ = ["GeneratedNumber", "ReceiptNumberRequest"]


class ReceiptNumberRequest(BaseSchema):
    issue_date: Optional[Date] = None


class GeneratedNumber(BaseSchema):
    number: str
