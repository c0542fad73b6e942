"""Academic reference models."""

from backoffice.models.academic.university import AcademicSession, Course, University

__all__ = ["AcademicSession", "Course", "University"]
