"""
Number Sequence Model

Persisted counters behind admission and receipt numbers.
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.models.base import BaseModel, TimestampModel, UUIDMixin


class NumberSequence(UUIDMixin, TimestampModel, BaseModel):
    """Last issued value for one (prefix, period) pair, e.g. ("ADM", "2024")."""

    __tablename__ = "number_sequences"

    prefix: Mapped[str] = mapped_column(String(20), nullable=False)
    period: Mapped[str] = mapped_column(String(20), nullable=False)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("prefix", "period", name="uq_number_sequence_prefix_period"),
    )
