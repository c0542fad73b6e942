"""Document numbering services."""

from backoffice.services.numbering.numbering_service import NumberingService

__all__ = ["NumberingService"]
