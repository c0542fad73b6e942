"""
Agent Repository
"""

from sqlalchemy.orm import Session

from backoffice.models.student import Agent
from backoffice.repositories.base.base_repository import BaseRepository


class AgentRepository(BaseRepository[Agent]):

    def __init__(self, db: Session):
        super().__init__(Agent, db)
