"""
Student Model

Aggregation root for the fee ledger: a student owns zero or more
FeePayment rows and carries denormalized references to university,
course, academic session and agent.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import BaseModel, StudentStatus, TimestampModel, UUIDMixin, enum_values


class Student(UUIDMixin, TimestampModel, BaseModel):
    """Admitted student."""

    __tablename__ = "students"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    admission_number: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        unique=True,
    )
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    status: Mapped[StudentStatus] = mapped_column(
        Enum(StudentStatus, name="student_status_enum", values_callable=enum_values),
        nullable=False,
        default=StudentStatus.ACTIVE,
    )

    university_id: Mapped[UUID] = mapped_column(
        ForeignKey("universities.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    academic_session_id: Mapped[UUID] = mapped_column(
        ForeignKey("academic_sessions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    agent_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    university = relationship("University", back_populates="students", lazy="select")
    course = relationship("Course", lazy="select")
    academic_session = relationship("AcademicSession", lazy="select")
    agent = relationship("Agent", back_populates="students", lazy="select")

    fee_payments: Mapped[List["FeePayment"]] = relationship(
        "FeePayment",
        back_populates="student",
        lazy="select",
    )

    __table_args__ = (
        Index("ix_student_course_session", "course_id", "academic_session_id"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
