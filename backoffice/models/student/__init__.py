"""Student and agent models."""

from backoffice.models.student.agent import Agent
from backoffice.models.student.student import Student

__all__ = ["Agent", "Student"]
