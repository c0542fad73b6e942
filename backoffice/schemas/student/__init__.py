"""Student and agent schemas."""

from backoffice.schemas.student.agent import (
    AgentCreate,
    AgentResponse,
    AgentUpdate,
    CommissionStatusUpdate,
)
from backoffice.schemas.student.student import (
    StudentCreate,
    StudentFinancialSummary,
    StudentResponse,
    StudentUpdate,
    UpcomingPayment,
)

__all__ = [
    "AgentCreate",
    "AgentResponse",
    "AgentUpdate",
    "CommissionStatusUpdate",
    "StudentCreate",
    "StudentFinancialSummary",
    "StudentResponse",
    "StudentUpdate",
    "UpcomingPayment",
]
