"""Student and agent services."""

from backoffice.services.student.agent_service import AgentService
from backoffice.services.student.student_service import StudentService

__all__ = ["AgentService", "StudentService"]
