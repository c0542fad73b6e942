"""Common schema building blocks."""

from backoffice.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    quantize_money,
)
from backoffice.schemas.common.response import ErrorBody, ErrorResponse, MessageResponse

__all__ = [
    "BaseCreateSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "ErrorBody",
    "ErrorResponse",
    "MessageResponse",
    "quantize_money",
]
