"""
University, course and academic session schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import Optional

from pydantic import Field, model_validator

from backoffice.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = [
    "UniversityCreate",
    "UniversityUpdate",
    "UniversityResponse",
    "CourseCreate",
    "CourseUpdate",
    "CourseResponse",
    "AcademicSessionCreate",
    "AcademicSessionUpdate",
    "AcademicSessionResponse",
]


class UniversityCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255, description="University name")


class UniversityUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)


class UniversityResponse(BaseResponseSchema):
    name: str


class CourseCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255, description="Course name")


class CourseUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)


class CourseResponse(BaseResponseSchema):
    name: str


class AcademicSessionCreate(BaseCreateSchema):
    """Admission batch, e.g. "2024-2025"."""

    session_name: str = Field(..., min_length=1, max_length=100)
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    is_active: bool = True

    @model_validator(mode="after")
    def validate_dates(self) -> "AcademicSessionCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class AcademicSessionUpdate(BaseUpdateSchema):
    session_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    is_active: Optional[bool] = None


class AcademicSessionResponse(BaseResponseSchema):
    session_name: str
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    is_active: bool
