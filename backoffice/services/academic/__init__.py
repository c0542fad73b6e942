"""Academic reference services."""

from backoffice.services.academic.academic_service import (
    AcademicSessionService,
    CourseService,
    UniversityService,
)

__all__ = ["AcademicSessionService", "CourseService", "UniversityService"]
