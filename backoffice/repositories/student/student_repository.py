"""
Student Repository

Student lookups, including the filtered selection used by fee
assignment.
"""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from backoffice.models.student import Student
from backoffice.repositories.base.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Student queries."""

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def find_by_admission_number(self, admission_number: str) -> Optional[Student]:
        return (
            self.db.query(Student)
            .filter(Student.admission_number == admission_number)
            .first()
        )

    def find_for_assignment(
        self,
        student_ids: Optional[Sequence[UUID]] = None,
        course_id: Optional[UUID] = None,
        academic_session_id: Optional[UUID] = None,
        university_id: Optional[UUID] = None,
        name: Optional[str] = None,
    ) -> List[Student]:
        """
        Select the students a fee structure is being applied to.

        All given filters are combined with AND. ``name`` matches a
        case-insensitive substring of the first name, last name or full
        name. Wildcard characters in ``name`` match literally.
        """
        query = self.db.query(Student)

        if student_ids is not None:
            query = query.filter(Student.id.in_(list(student_ids)))
        if course_id:
            query = query.filter(Student.course_id == course_id)
        if academic_session_id:
            query = query.filter(Student.academic_session_id == academic_session_id)
        if university_id:
            query = query.filter(Student.university_id == university_id)
        if name and name.strip():
            needle = name.strip().lower()
            full_name = func.lower(Student.first_name + " " + Student.last_name)
            query = query.filter(
                or_(
                    func.lower(Student.first_name).contains(needle, autoescape=True),
                    func.lower(Student.last_name).contains(needle, autoescape=True),
                    full_name.contains(needle, autoescape=True),
                )
            )

        return query.order_by(Student.last_name, Student.first_name).all()

    def admission_numbers_with_prefix(self, prefix: str) -> List[str]:
        rows = (
            self.db.query(Student.admission_number)
            .filter(Student.admission_number.startswith(prefix, autoescape=True))
            .all()
        )
        return [row[0] for row in rows]
