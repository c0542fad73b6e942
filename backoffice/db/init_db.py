"""Database initialization utilities."""
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from backoffice.core.logging import get_logger
from backoffice.db.base import Base, import_models

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Suitable for development and tests; production deployments manage the
    schema with migrations.
    """
    if bind is None:
        from backoffice.db.session import engine as bind

    import_models()
    existing_tables = inspect(bind).get_table_names()
    Base.metadata.create_all(bind=bind)
    logger.info(
        "Database initialized",
        extra={"existing_tables": len(existing_tables), "total_tables": len(Base.metadata.tables)},
    )


def drop_db(bind: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data!
    """
    if bind is None:
        from backoffice.db.session import engine as bind

    import_models()
    Base.metadata.drop_all(bind=bind)
    logger.warning("All database tables dropped")
