"""
Academic Services

University, course and academic session management. Names are unique
(case-insensitive for universities and courses).
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ErrorCode
from backoffice.models.academic import AcademicSession, Course, University
from backoffice.repositories.academic import (
    AcademicSessionRepository,
    CourseRepository,
    UniversityRepository,
)
from backoffice.services.base import BaseService, ServiceResult


class _UniqueNameMixin:
    """Reject a second entity with the same name before hitting the constraint."""

    def _check_unique_name(self, name: Optional[str], current_id=None) -> Optional[ServiceResult]:
        if not name:
            return None
        existing = self.repository.find_by_name(name)
        if existing and existing.id != current_id:
            return ServiceResult.conflict(
                f"{self.entity_name} '{name}' already exists",
                code=ErrorCode.DUPLICATE_ENTRY,
                details={"name": name},
            )
        return None

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        return self._check_unique_name(data.get("name"))

    def _validate_update(self, entity, data: Dict[str, Any]) -> Optional[ServiceResult]:
        return self._check_unique_name(data.get("name"), entity.id)


class UniversityService(_UniqueNameMixin, BaseService[University, UniversityRepository]):
    entity_name = "University"

    def __init__(self, repository: UniversityRepository, db_session: Session):
        super().__init__(repository, db_session)


class CourseService(_UniqueNameMixin, BaseService[Course, CourseRepository]):
    entity_name = "Course"

    def __init__(self, repository: CourseRepository, db_session: Session):
        super().__init__(repository, db_session)


class AcademicSessionService(BaseService[AcademicSession, AcademicSessionRepository]):
    entity_name = "Academic session"

    def __init__(self, repository: AcademicSessionRepository, db_session: Session):
        super().__init__(repository, db_session)
