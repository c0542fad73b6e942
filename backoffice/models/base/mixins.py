"""
SQLAlchemy model mixins for reusable functionality.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates


# Money columns: 12 digits, 2 decimal places
Money = Numeric(precision=12, scale=2)


class UUIDMixin:
    """
    Mixin for UUID primary key.

    Provides UUID-based primary key with automatic
    generation using uuid4.
    """

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        comment="Unique identifier (UUID v4)",
    )


class ContactMixin:
    """
    Mixin for phone and email contact fields.
    """

    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        index=True,
        comment="Email address",
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        comment="Primary phone number",
    )

    @validates('email')
    def validate_email(self, key: str, value: Optional[str]) -> Optional[str]:
        """Normalize email."""
        if value:
            return value.strip().lower()
        return value
