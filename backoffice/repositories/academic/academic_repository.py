"""
Academic Repositories

Universities, courses and academic sessions: thin lookups over the base
repository.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from backoffice.models.academic import AcademicSession, Course, University
from backoffice.repositories.base.base_repository import BaseRepository


class UniversityRepository(BaseRepository[University]):
    """University lookups."""

    def __init__(self, db: Session):
        super().__init__(University, db)

    def find_by_name(self, name: str) -> Optional[University]:
        return (
            self.db.query(University)
            .filter(func.lower(University.name) == name.strip().lower())
            .first()
        )


class CourseRepository(BaseRepository[Course]):
    """Course lookups."""

    def __init__(self, db: Session):
        super().__init__(Course, db)

    def find_by_name(self, name: str) -> Optional[Course]:
        return (
            self.db.query(Course)
            .filter(func.lower(Course.name) == name.strip().lower())
            .first()
        )


class AcademicSessionRepository(BaseRepository[AcademicSession]):
    """Academic session lookups."""

    def __init__(self, db: Session):
        super().__init__(AcademicSession, db)
