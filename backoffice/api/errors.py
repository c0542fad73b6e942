"""
Error translation for the HTTP layer.

Every error response has the body ``{"error": {"code", "message", "details"}}``.
"""

from typing import Any, Dict, Optional, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backoffice.core.exceptions import BaseAppException, ErrorCode
from backoffice.core.logging import get_logger
from backoffice.schemas.common.response import ErrorResponse
from backoffice.services.base import ServiceError, ServiceResult

logger = get_logger(__name__)

T = TypeVar("T")

STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.MISSING_REQUIRED_FIELD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_FORMAT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_SELECTION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INACTIVE_FEE_STRUCTURE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_ENTRY: status.HTTP_409_CONFLICT,
    ErrorCode.CONSTRAINT_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorCode.FOREIGN_KEY_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENT_MODIFICATION: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_ASSIGNED: status.HTTP_409_CONFLICT,
    ErrorCode.RESOURCE_IN_USE: status.HTTP_409_CONFLICT,
}


class ServiceFailure(Exception):
    """Raised by endpoints to turn a failed ServiceResult into an HTTP error."""

    def __init__(self, error: ServiceError):
        self.error = error
        super().__init__(error.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_CODE.get(self.error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def unwrap(result: ServiceResult[T]) -> T:
    """Return the result's data or raise ServiceFailure."""
    if not result.is_success:
        raise ServiceFailure(result.error)
    return result.data


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse.create(code=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def service_failure_handler(request: Request, exc: ServiceFailure) -> JSONResponse:
    details = dict(exc.error.details or {})
    if exc.error.field:
        details.setdefault("field", exc.error.field)
    if exc.status_code >= 500:
        logger.error("Request failed", extra={"path": request.url.path, "code": exc.error.code.value})
    return error_response(exc.status_code, exc.error.code.value, exc.error.message, details)


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    return error_response(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR.value,
        "Request validation failed",
        {"errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceFailure, service_failure_handler)
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
