"""
University, Course and Academic Session models.

Reference entities that students, fee structures and hostels point at.
"""

from datetime import date as Date
from typing import List, Optional

from sqlalchemy import Boolean, Date as SQLDate, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.models.base import BaseModel, TimestampModel, UUIDMixin


class University(UUIDMixin, TimestampModel, BaseModel):
    """Partner university students are admitted to."""

    __tablename__ = "universities"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    students: Mapped[List["Student"]] = relationship(
        "Student",
        back_populates="university",
        lazy="select",
    )
    hostels: Mapped[List["Hostel"]] = relationship(
        "Hostel",
        back_populates="university",
        lazy="select",
    )


class Course(UUIDMixin, TimestampModel, BaseModel):
    """Course of study (e.g. MBBS)."""

    __tablename__ = "courses"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class AcademicSession(UUIDMixin, TimestampModel, BaseModel):
    """Admission batch / academic year."""

    __tablename__ = "academic_sessions"

    session_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    start_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)
    end_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
