"""
Service layer root package.

Each subpackage implements application use-cases on top of:

- SQLAlchemy models (backoffice.models.*)
- Repositories (backoffice.repositories.*)
- Pydantic schemas (backoffice.schemas.*)
- Common service infrastructure (backoffice.services.base)

Typical pattern for a service:

    class SomeService(BaseService[SomeModel, SomeRepository]):
        def some_use_case(self, ...) -> ServiceResult[...]:
            try:
                with self.transaction():
                    ...
                return ServiceResult.success(...)
            except Exception as e:
                return self._handle_exception(e, "some use case")
"""

from backoffice.services.base import BaseService, ErrorCode, ErrorSeverity, ServiceError, ServiceResult

__all__ = [
    "BaseService",
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
]
