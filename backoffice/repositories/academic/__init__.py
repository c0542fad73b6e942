"""Academic reference repositories."""

from backoffice.repositories.academic.academic_repository import (
    AcademicSessionRepository,
    CourseRepository,
    UniversityRepository,
)

__all__ = ["AcademicSessionRepository", "CourseRepository", "UniversityRepository"]
