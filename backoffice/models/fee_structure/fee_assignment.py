"""
Fee assignment and per-student customization models.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from backoffice.models.base import BaseModel, Money, TimestampModel, UUIDMixin


class StudentFeeAssignment(UUIDMixin, TimestampModel, BaseModel):
    """Records that a fee structure was applied to a student."""

    __tablename__ = "student_fee_assignments"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fee_structure_id: Mapped[UUID] = mapped_column(
        ForeignKey("fee_structures.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    student = relationship("Student", lazy="select")
    fee_structure = relationship("FeeStructure", lazy="select")


class StudentFeeCustomization(UUIDMixin, TimestampModel, BaseModel):
    """
    Per-student override of a component amount.

    When present, custom_amount supersedes the component amount for that
    student's ledger row.
    """

    __tablename__ = "student_fee_customizations"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fee_structure_component_id: Mapped[UUID] = mapped_column(
        ForeignKey("fee_structure_components.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    custom_amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "student_id",
            "fee_structure_component_id",
            name="uq_student_fee_customization_pair",
        ),
        CheckConstraint("custom_amount >= 0", name="ck_customization_amount_positive"),
    )
