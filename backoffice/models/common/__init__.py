"""Shared bookkeeping models."""

from backoffice.models.common.number_sequence import NumberSequence

__all__ = ["NumberSequence"]
