"""Academic reference schemas."""

from backoffice.schemas.academic.academic import (
    AcademicSessionCreate,
    AcademicSessionResponse,
    AcademicSessionUpdate,
    CourseCreate,
    CourseResponse,
    CourseUpdate,
    UniversityCreate,
    UniversityResponse,
    UniversityUpdate,
)

__all__ = [
    "AcademicSessionCreate",
    "AcademicSessionResponse",
    "AcademicSessionUpdate",
    "CourseCreate",
    "CourseResponse",
    "CourseUpdate",
    "UniversityCreate",
    "UniversityResponse",
    "UniversityUpdate",
]
