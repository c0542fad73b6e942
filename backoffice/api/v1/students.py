"""
Students and agents, plus the per-student ledger views.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backoffice.api import deps
from backoffice.api.errors import unwrap
from backoffice.api.v1.crud import create_crud_router
from backoffice.schemas.payment import FeePaymentResponse
from backoffice.schemas.student import (
    AgentCreate,
    AgentResponse,
    AgentUpdate,
    CommissionStatusUpdate,
    StudentCreate,
    StudentFinancialSummary,
    StudentResponse,
    StudentUpdate,
)
from backoffice.services.payment import FeeLedgerService
from backoffice.services.student import AgentService, StudentService

router = APIRouter()


@router.get(
    "/students/{student_id}/financial-summary",
    response_model=StudentFinancialSummary,
    summary="Student financial summary",
    tags=["Students"],
    description="Totals, pending balance and upcoming payments for one student",
)
def get_financial_summary(
    student_id: UUID,
    service: StudentService = Depends(deps.get_student_service),
):
    return unwrap(service.get_financial_summary(student_id))


@router.get(
    "/students/{student_id}/fee-payments",
    response_model=List[FeePaymentResponse],
    summary="Student ledger rows",
    tags=["Students"],
)
def list_student_fee_payments(
    student_id: UUID,
    unpaid_only: bool = Query(False),
    service: FeeLedgerService = Depends(deps.get_fee_ledger_service),
):
    return unwrap(service.list_for_student(student_id, unpaid_only=unpaid_only))


@router.post(
    "/agents/{agent_id}/commission-status",
    response_model=AgentResponse,
    summary="Set commission payment status",
    tags=["Agents"],
)
def set_commission_status(
    agent_id: UUID,
    payload: CommissionStatusUpdate,
    service: AgentService = Depends(deps.get_agent_service),
):
    return unwrap(service.set_commission_status(agent_id, payload.payment_status))


router.include_router(
    create_crud_router(
        entity_name="Student",
        get_service=deps.get_student_service,
        create_schema=StudentCreate,
        update_schema=StudentUpdate,
        response_schema=StudentResponse,
        filter_fields=("university_id", "course_id", "academic_session_id", "agent_id", "status"),
    ),
    prefix="/students",
    tags=["Students"],
)
router.include_router(
    create_crud_router(
        entity_name="Agent",
        get_service=deps.get_agent_service,
        create_schema=AgentCreate,
        update_schema=AgentUpdate,
        response_schema=AgentResponse,
        filter_fields=("status", "commission_payment_status"),
    ),
    prefix="/agents",
    tags=["Agents"],
)
