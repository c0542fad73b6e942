"""
Agent Model

Recruitment agents who refer students and earn a commission on the
fees those students pay.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import CheckConstraint, Enum, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import (
    AgentStatus,
    BaseModel,
    CommissionPaymentStatus,
    ContactMixin,
    TimestampModel,
    UUIDMixin,
    enum_values,
)


class Agent(UUIDMixin, TimestampModel, ContactMixin, BaseModel):
    """
    Agent Model

    commission_rate is a percentage applied to the total paid by the
    agent's students. commission_payment_status is set by staff when the
    commission has been settled; it is never derived.
    """

    __tablename__ = "agents"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    commission_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2),
        nullable=False,
        default=Decimal("0.00"),
    )
    status: Mapped[AgentStatus] = mapped_column(
        Enum(AgentStatus, name="agent_status_enum", values_callable=enum_values),
        nullable=False,
        default=AgentStatus.ACTIVE,
    )
    commission_payment_status: Mapped[CommissionPaymentStatus] = mapped_column(
        Enum(
            CommissionPaymentStatus,
            name="commission_payment_status_enum",
            values_callable=enum_values,
        ),
        nullable=False,
        default=CommissionPaymentStatus.UNPAID,
    )

    students: Mapped[List["Student"]] = relationship(
        "Student",
        back_populates="agent",
        lazy="select",
    )

    __table_args__ = (
        CheckConstraint(
            "commission_rate >= 0 AND commission_rate <= 100",
            name="ck_agent_commission_rate_range",
        ),
    )
