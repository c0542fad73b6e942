"""
Number Sequence Repository

Counters behind admission and receipt numbers.
"""

from sqlalchemy.orm import Session

from backoffice.models.common import NumberSequence
from backoffice.repositories.base.base_repository import BaseRepository


class NumberSequenceRepository(BaseRepository[NumberSequence]):

    def __init__(self, db: Session):
        super().__init__(NumberSequence, db)

    def next_value(self, prefix: str, period: str, floor: int = 0) -> int:
        """
        Increment and return the counter for (prefix, period).

        ``floor`` is the highest value already in use elsewhere; the
        returned value is always greater than it. Flushes but does not
        commit.
        """
        sequence = (
            self.db.query(NumberSequence)
            .filter(NumberSequence.prefix == prefix, NumberSequence.period == period)
            .with_for_update()
            .first()
        )
        if sequence is None:
            sequence = NumberSequence(prefix=prefix, period=period, last_value=0)
            self.db.add(sequence)

        sequence.last_value = max(sequence.last_value or 0, floor) + 1
        self.db.flush()
        return sequence.last_value
