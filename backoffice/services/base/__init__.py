"""
Service base package.

Shared service plumbing: the ServiceResult pattern and the CRUD base
service.
"""

from backoffice.services.base.base_service import BaseService
from backoffice.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)

__all__ = [
    "BaseService",
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
]
