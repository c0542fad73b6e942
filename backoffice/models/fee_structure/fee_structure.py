"""
Fee Structure Models

A fee structure bundles fee-type components for one university and
course. Each component carries its own amount, which overrides the
catalog amount of its fee type.
"""

from decimal import Decimal
from typing import List
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import BaseModel, FeeFrequency, Money, TimestampModel, UUIDMixin
from backoffice.models.fee_structure.fee_type import fee_frequency_type


class FeeStructure(UUIDMixin, TimestampModel, BaseModel):
    """Named bundle of fee components for a university and course."""

    __tablename__ = "fee_structures"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    university_id: Mapped[UUID] = mapped_column(
        ForeignKey("universities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    university = relationship("University", lazy="select")
    course = relationship("Course", lazy="select")

    components: Mapped[List["FeeStructureComponent"]] = relationship(
        "FeeStructureComponent",
        back_populates="fee_structure",
        cascade="all, delete-orphan",
        lazy="select",
    )

    __table_args__ = (
        Index("ix_fee_structure_university_course", "university_id", "course_id"),
    )

    @property
    def total_amount(self) -> Decimal:
        return sum((c.amount for c in self.components), Decimal("0.00"))


class FeeStructureComponent(UUIDMixin, TimestampModel, BaseModel):
    """One line item of a fee structure."""

    __tablename__ = "fee_structure_components"

    fee_structure_id: Mapped[UUID] = mapped_column(
        ForeignKey("fee_structures.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fee_type_id: Mapped[UUID] = mapped_column(
        ForeignKey("fee_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    frequency: Mapped[FeeFrequency] = mapped_column(
        fee_frequency_type,
        nullable=False,
        default=FeeFrequency.ONE_TIME,
    )

    fee_structure = relationship("FeeStructure", back_populates="components", lazy="select")
    fee_type = relationship("FeeType", lazy="joined")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_fee_component_amount_positive"),
    )
