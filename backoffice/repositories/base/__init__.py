"""
Base repository package.

Exports the generic repository every domain repository builds on.
"""

from backoffice.repositories.base.base_repository import BaseRepository, ModelType

__all__ = ["BaseRepository", "ModelType"]
