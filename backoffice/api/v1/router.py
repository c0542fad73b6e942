"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the back-office service
"""
from fastapi import APIRouter

from backoffice.api.v1 import academic, expenses, fees, invoices, numbering, reports, students
from backoffice.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    responses={
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

for module in (academic, students, fees, expenses, reports, invoices, numbering):
    router.include_router(module.router)
    logger.debug(f"Registered {module.__name__} router")
