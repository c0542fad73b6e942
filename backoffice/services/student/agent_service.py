"""
Agent Service
"""

from uuid import UUID

from sqlalchemy.orm import Session

from backoffice.models.base import CommissionPaymentStatus
from backoffice.models.student import Agent
from backoffice.repositories.student import AgentRepository
from backoffice.services.base import BaseService, ServiceResult


class AgentService(BaseService[Agent, AgentRepository]):
    """Agent management, including the manual commission settlement flag."""

    entity_name = "Agent"

    def __init__(self, repository: AgentRepository, db_session: Session):
        super().__init__(repository, db_session)

    def set_commission_status(
        self,
        agent_id: UUID,
        status: CommissionPaymentStatus,
    ) -> ServiceResult[Agent]:
        """Mark an agent's commission Paid or Unpaid."""
        try:
            agent = self.repository.find_by_id(agent_id)
            if not agent:
                return ServiceResult.not_found(self.entity_name, str(agent_id))

            with self.transaction():
                self.repository.update_entity(agent, {"commission_payment_status": status}, commit=False)

            self.repository.refresh(agent)
            self._logger.info(
                "Agent commission status changed",
                extra={"agent_id": str(agent_id), "commission_payment_status": status.value},
            )
            return ServiceResult.success(agent, message=f"Commission marked {status.value}")
        except Exception as e:
            return self._handle_exception(e, "set agent commission status", agent_id)
