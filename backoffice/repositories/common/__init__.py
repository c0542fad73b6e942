"""Shared bookkeeping repositories."""

from backoffice.repositories.common.number_sequence_repository import NumberSequenceRepository

__all__ = ["NumberSequenceRepository"]
