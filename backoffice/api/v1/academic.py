"""Universities, courses and academic sessions."""

from fastapi import APIRouter

from backoffice.api import deps
from backoffice.api.v1.crud import create_crud_router
from backoffice.schemas.academic import (
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

router = APIRouter()

router.include_router(
    create_crud_router(
        entity_name="University",
        get_service=deps.get_university_service,
        create_schema=UniversityCreate,
        update_schema=UniversityUpdate,
        response_schema=UniversityResponse,
    ),
    prefix="/universities",
    tags=["Universities"],
)
router.include_router(
    create_crud_router(
        entity_name="Course",
        get_service=deps.get_course_service,
        create_schema=CourseCreate,
        update_schema=CourseUpdate,
        response_schema=CourseResponse,
    ),
    prefix="/courses",
    tags=["Courses"],
)
router.include_router(
    create_crud_router(
        entity_name="Academic session",
        get_service=deps.get_academic_session_service,
        create_schema=AcademicSessionCreate,
        update_schema=AcademicSessionUpdate,
        response_schema=AcademicSessionResponse,
        filter_fields=("is_active",),
    ),
    prefix="/academic-sessions",
    tags=["Academic Sessions"],
)
