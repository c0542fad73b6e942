"""
Base models package.

Provides the declarative base, abstract models, mixins and enums
for all database models.
"""

from backoffice.models.base.base_model import Base, BaseModel, TimestampModel
from backoffice.models.base.mixins import ContactMixin, Money, UUIDMixin
from backoffice.models.base.enums import (
    AgentStatus,
    AlertSeverity,
    CommissionPaymentStatus,
    DiscountType,
    ExpenseStatus,
    FeeFrequency,
    HostelStatus,
    InvoiceStatus,
    PaymentStatus,
    SalaryPaymentStatus,
    StudentStatus,
    enum_values,
)

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "ContactMixin",
    "Money",
    "UUIDMixin",
    "AgentStatus",
    "AlertSeverity",
    "CommissionPaymentStatus",
    "DiscountType",
    "ExpenseStatus",
    "FeeFrequency",
    "HostelStatus",
    "InvoiceStatus",
    "PaymentStatus",
    "SalaryPaymentStatus",
    "StudentStatus",
    "enum_values",
]
