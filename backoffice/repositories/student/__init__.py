"""Student and agent repositories."""

from backoffice.repositories.student.agent_repository import AgentRepository
from backoffice.repositories.student.student_repository import StudentRepository

__all__ = ["AgentRepository", "StudentRepository"]
