"""
Database enums shared by models and schemas.
"""

import enum
from typing import List, Type


def enum_values(enum_cls: Type[enum.Enum]) -> List[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]


class PaymentStatus(str, enum.Enum):
    """Ledger row status, derived from amount due and amount paid."""
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


class FeeFrequency(str, enum.Enum):
    """How often a fee component is charged."""
    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class StudentStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


class AgentStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class CommissionPaymentStatus(str, enum.Enum):
    """Manually tracked commission settlement flag."""
    UNPAID = "Unpaid"
    PAID = "Paid"


class ExpenseStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


class SalaryPaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    CANCELLED = "cancelled"


class HostelStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"


class InvoiceStatus(str, enum.Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


class DiscountType(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class AlertSeverity(str, enum.Enum):
    """Display severity of a due-payment alert."""
    DESTRUCTIVE = "destructive"
    SECONDARY = "secondary"
