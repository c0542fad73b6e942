"""Database session management."""
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from backoffice.config.settings import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite leaves foreign key enforcement off unless asked per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine, applying pool settings only where the dialect supports them."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, **settings.DB_CONNECT_ARGS},
            **kwargs,
        )
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_OVERFLOW,
        connect_args=settings.DB_CONNECT_ARGS,
        **kwargs,
    )


engine = build_engine(settings.get_database_url(), echo=settings.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
