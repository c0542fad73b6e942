"""
Standard API response wrappers.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from backoffice.schemas.common.base import BaseSchema

__all__ = [
    "ErrorBody",
    "ErrorResponse",
    "MessageResponse",
]


class ErrorBody(BaseSchema):
    code: str = Field(..., description="Application error code")
    message: str = Field(..., description="Error message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Structured error details")


class ErrorResponse(BaseSchema):
    """Standard error response."""

    error: ErrorBody

    @classmethod
    def create(cls, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        return cls(error=ErrorBody(code=code, message=message, details=details or {}))


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str = Field(..., description="Response message")

    @classmethod
    def create(cls, message: str):
        """Create message response."""
        return cls(message=message)
