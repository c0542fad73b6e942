"""
Agent schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from backoffice.models.base import AgentStatus, CommissionPaymentStatus
from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "AgentCreate",
    "AgentUpdate",
    "AgentResponse",
    "CommissionStatusUpdate",
]


class AgentCreate(BaseCreateSchema):
    """
    Recruitment agent.

    commission_rate is a percentage of the fees paid by the agent's
    students.
    """

    name: str = Field(..., min_length=1, max_length=255)
    contact_person: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    location: Optional[str] = Field(default=None, max_length=255)
    commission_rate: Decimal = Field(default=Decimal("0.00"), ge=Decimal("0"), le=Decimal("100"))
    status: AgentStatus = AgentStatus.ACTIVE

    @field_validator("commission_rate")
    @classmethod
    def quantize_rate(cls, v: Decimal) -> Decimal:
        return v.quantize(Decimal("0.01"))


class AgentUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    contact_person: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    location: Optional[str] = Field(default=None, max_length=255)
    commission_rate: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("100"))
    status: Optional[AgentStatus] = None


class AgentResponse(BaseResponseSchema):
    name: str
    contact_person: str
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    commission_rate: Decimal
    status: AgentStatus
    commission_payment_status: CommissionPaymentStatus


class CommissionStatusUpdate(BaseSchema):
    """Manual commission settlement flag."""

    payment_status: CommissionPaymentStatus
