"""
Base repository with standardized CRUD operations, transaction management, and error handling.

Provides foundation for all domain repositories with type safety and
consistent translation of database errors into application exceptions.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from backoffice.core.exceptions import (
    BaseAppException,
    ConflictError,
    EntityAlreadyExistsError,
    ErrorCode,
    ForeignKeyViolationError,
    OptimisticLockError,
    RepositoryError,
)
from backoffice.core.logging import get_logger
from backoffice.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with standardized operations.

    Provides CRUD operations, transaction management, and error handling
    for all domain repositories. Write methods take a ``commit`` flag so
    that services can group several writes into one ``transaction()``.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self):
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction():
                repository.create(entity, commit=False)
                repository.update_entity(entity, data, commit=False)
        """
        try:
            yield self.db
            self.db.commit()
        except BaseAppException:
            self.db.rollback()
            raise
        except StaleDataError as e:
            self.db.rollback()
            raise OptimisticLockError() from e
        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {str(e)}", exc_info=True)
            raise RepositoryError(f"Transaction failed: {str(e)}", table=self.model.__tablename__) from e
        except Exception:
            self.db.rollback()
            raise

    # ==================== Create Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Create new entity.

        Args:
            entity: Entity to create
            commit: Whether to commit immediately

        Returns:
            Created entity

        Raises:
            EntityAlreadyExistsError: If entity violates a unique constraint
            ForeignKeyViolationError: If entity references a missing parent row
        """
        try:
            self.db.add(entity)

            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()

            logger.info(f"Created {self.model.__name__} with id: {entity.id}")
            return entity

        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Create failed: {str(e)}", operation="create",
                                  table=self.model.__tablename__) from e

    def create_many(self, entities: List[ModelType], commit: bool = True) -> List[ModelType]:
        """
        Create several entities in one flush.

        Args:
            entities: List of entities to create
            commit: Whether to commit immediately

        Returns:
            List of created entities
        """
        if not entities:
            return []

        try:
            self.db.add_all(entities)
            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Bulk created {len(entities)} {self.model.__name__} entities")
            return entities

        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Bulk create failed: {str(e)}", operation="create_many",
                                  table=self.model.__tablename__) from e

    # ==================== Read Operations ====================

    def find_by_id(self, id: Union[UUID, int]) -> Optional[ModelType]:
        """
        Find entity by ID.

        Returns:
            Entity or None
        """
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by ID failed: {str(e)}") from e


    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching criteria.

        Args:
            criteria: Filter criteria as key-value pairs; list values become IN filters
            skip: Number of records to skip
            limit: Maximum number of records (None for no limit)
            order_by: List of fields to order by (prefix with - for desc)

        Returns:
            List of matching entities
        """
        try:
            query = self._apply_criteria(self.db.query(self.model), criteria)

            for field in order_by or []:
                if field.startswith('-'):
                    query = query.order_by(getattr(self.model, field[1:]).desc())
                else:
                    query = query.order_by(getattr(self.model, field))

            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()

        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by criteria failed: {str(e)}") from e


    # ==================== Update Operations ====================


    def update_entity(
        self,
        entity: ModelType,
        data: Dict[str, Any],
        version: Optional[int] = None,
        commit: bool = True,
    ) -> ModelType:
        """Apply ``data`` to an already loaded entity."""
        if version is not None and hasattr(entity, 'version'):
            if entity.version != version:
                raise OptimisticLockError(
                    f"Version mismatch: expected {version}, got {entity.version}",
                    expected_version=version,
                    actual_version=entity.version,
                )

        for key, value in data.items():
            if hasattr(entity, key):
                setattr(entity, key, value)

        try:
            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()

            logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
            return entity

        except StaleDataError as e:
            self.db.rollback()
            raise OptimisticLockError() from e
        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Update failed: {str(e)}", operation="update",
                                  table=self.model.__tablename__) from e

    # ==================== Delete Operations ====================

    def delete(self, id: Union[UUID, int], commit: bool = True) -> bool:
        """
        Hard delete entity.

        Returns:
            True if deleted, False if not found

        Raises:
            ConflictError: If other rows still reference the entity
        """
        entity = self.find_by_id(id)
        if not entity:
            return False

        try:
            self.db.delete(entity)

            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Deleted {self.model.__name__} with id: {id}")
            return True

        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                f"{self.model.__name__} is still referenced by other records",
                ErrorCode.RESOURCE_IN_USE,
                {"table": self.model.__tablename__, "id": str(id)},
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Delete failed: {str(e)}", operation="delete",
                                  table=self.model.__tablename__) from e

    # ==================== Count Operations ====================

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching criteria."""
        try:
            query = self._apply_criteria(self.db.query(func.count(self.model.id)), criteria or {})
            return query.scalar() or 0
        except SQLAlchemyError as e:
            raise RepositoryError(f"Count failed: {str(e)}") from e

    def exists(self, criteria: Dict[str, Any]) -> bool:
        """Check if entity exists matching criteria."""
        return self.count(criteria) > 0

    # ==================== Utility Methods ====================

    def refresh(self, entity: ModelType) -> ModelType:
        self.db.refresh(entity)
        return entity

    def _integrity_error(self, error: IntegrityError) -> ConflictError:
        """Translate a constraint failure; foreign key and unique violations read differently."""
        if "foreign key" in str(error.orig).lower():
            return ForeignKeyViolationError(
                f"{self.model.__name__} references a record that does not exist",
                table=self.model.__tablename__,
            )
        return EntityAlreadyExistsError(
            f"{self.model.__name__} already exists",
            table=self.model.__tablename__,
        )

    def _apply_criteria(self, query, criteria: Dict[str, Any]):
        for key, value in criteria.items():
            if hasattr(self.model, key):
                column = getattr(self.model, key)
                if isinstance(value, (list, tuple, set)):
                    query = query.filter(column.in_(list(value)))
                else:
                    query = query.filter(column == value)
        return query
