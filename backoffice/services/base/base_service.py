"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel as PydanticModel
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from backoffice.core.exceptions import BaseAppException, OptimisticLockError
from backoffice.core.logging import get_logger
from backoffice.repositories.base.base_repository import BaseRepository
from backoffice.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)

Payload = Union[PydanticModel, Dict[str, Any]]


class BaseService(Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Consistent error handling via ServiceResult
    - Transaction management utilities
    - Standardized CRUD operations
    - Validation hooks
    """

    #: Human-readable entity name used in messages
    entity_name: str = "Entity"

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__name__).add_context(entity=self.entity_name)

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert exception to a ServiceResult failure with logging.

        Application exceptions keep their own code and message; anything
        else becomes an INTERNAL_ERROR and is logged with a traceback.
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        if isinstance(exception, StaleDataError):
            exception = OptimisticLockError()

        if isinstance(exception, BaseAppException):
            self._logger.warning(f"{operation} rejected: {exception.message}", extra=context)
            return ServiceResult.from_app_exception(exception)

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Failed to {operation}",
                details={
                    "error": str(exception),
                    "entity_ref": str(entity_ref) if entity_ref is not None else None,
                },
                severity=ErrorSeverity.CRITICAL,
            )
        )

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.repository.create(entity, commit=False)
                # commit on success, rollback on exception
        """
        with self.repository.transaction() as session:
            yield session

    # -------------------------------------------------------------------------
    # Common CRUD Operations
    # -------------------------------------------------------------------------

    def get_by_id(self, entity_id: UUID) -> ServiceResult[TModel]:
        """Retrieve entity by ID."""
        try:
            entity = self.repository.find_by_id(entity_id)
            if not entity:
                return ServiceResult.not_found(self.entity_name, str(entity_id))
            return ServiceResult.success(entity)
        except Exception as e:
            return self._handle_exception(e, f"get {self.entity_name}", entity_id)

    def list(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult[List[TModel]]:
        """List entities, newest first."""
        try:
            criteria = {k: v for k, v in (filters or {}).items() if v is not None}
            entities = self.repository.find_by_criteria(
                criteria, skip=skip, limit=limit, order_by=["-created_at"]
            )
            return ServiceResult.success(entities, metadata={"count": len(entities)})
        except Exception as e:
            return self._handle_exception(e, f"list {self.entity_name}")

    def create(self, payload: Payload) -> ServiceResult[TModel]:
        """
        Create a new entity.

        Args:
            payload: Create schema or plain dict of column values
        """
        data = self._to_dict(payload)
        try:
            validation_result = self._validate_create(data)
            if validation_result is not None and not validation_result.is_success:
                return validation_result

            with self.transaction():
                data = self._prepare_create(data)
                entity = self.repository.create(self.repository.model(**data), commit=False)
                self._after_create(entity)

            self.repository.refresh(entity)
            self._log_operation(f"create {self.entity_name}", entity.id)
            return ServiceResult.success(entity, message=f"{self.entity_name} created successfully")
        except Exception as e:
            return self._handle_exception(e, f"create {self.entity_name}")

    def update(self, entity_id: UUID, payload: Payload) -> ServiceResult[TModel]:
        """
        Update an existing entity.

        Only fields explicitly present in the payload are applied.
        """
        data = self._to_dict(payload, exclude_unset=True)
        try:
            entity = self.repository.find_by_id(entity_id)
            if not entity:
                return ServiceResult.not_found(self.entity_name, str(entity_id))

            validation_result = self._validate_update(entity, data)
            if validation_result is not None and not validation_result.is_success:
                return validation_result

            with self.transaction():
                data = self._prepare_update(entity, data)
                self.repository.update_entity(entity, data, commit=False)
                self._after_update(entity, data)

            self.repository.refresh(entity)
            self._log_operation(f"update {self.entity_name}", entity_id, {"fields": sorted(data)})
            return ServiceResult.success(entity, message=f"{self.entity_name} updated successfully")
        except Exception as e:
            return self._handle_exception(e, f"update {self.entity_name}", entity_id)

    def delete(self, entity_id: UUID) -> ServiceResult[bool]:
        """Delete an entity."""
        try:
            validation_result = self._validate_delete(entity_id)
            if validation_result is not None and not validation_result.is_success:
                return validation_result

            with self.transaction():
                deleted = self.repository.delete(entity_id, commit=False)
            if not deleted:
                return ServiceResult.not_found(self.entity_name, str(entity_id))

            self._log_operation(f"delete {self.entity_name}", entity_id)
            return ServiceResult.success(True, message=f"{self.entity_name} deleted successfully")
        except Exception as e:
            return self._handle_exception(e, f"delete {self.entity_name}", entity_id)

    # -------------------------------------------------------------------------
    # Validation Hooks (Override in subclasses)
    # -------------------------------------------------------------------------

    def _validate_create(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        """
        Hook for validating data before create operation.

        Returns:
            ServiceResult with failure if validation fails, None if valid
        """
        return None

    def _validate_update(self, entity: TModel, data: Dict[str, Any]) -> Optional[ServiceResult]:
        """Hook for validating data before update operation."""
        return None

    def _validate_delete(self, entity_id: UUID) -> Optional[ServiceResult]:
        """Hook for validating before delete operation."""
        return None

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook to fill derived columns before insert."""
        return data

    def _prepare_update(self, entity: TModel, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook to fill derived columns before update."""
        return data

    # -------------------------------------------------------------------------
    # Lifecycle Hooks (Override in subclasses)
    # -------------------------------------------------------------------------

    def _after_create(self, entity: TModel) -> None:
        pass

    def _after_update(self, entity: TModel, changes: Dict[str, Any]) -> None:
        pass

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_dict(payload: Payload, exclude_unset: bool = False) -> Dict[str, Any]:
        if isinstance(payload, PydanticModel):
            return payload.model_dump(exclude_unset=exclude_unset)
        return dict(payload)

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log service operation with standardized format."""
        context = {"entity_ref": str(entity_ref) if entity_ref else None}
        if extra:
            context.update(extra)

        self._logger.info(f"Operation: {operation}", extra=context)
