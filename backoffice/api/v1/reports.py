"""
Reports and CSV export.
"""

from datetime import date as Date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from backoffice.api import deps
from backoffice.api.errors import unwrap
from backoffice.schemas.report import (
    AgentCommissionReportRow,
    AgentStudentReportRow,
    DuePaymentAlert,
    HostelExpenseReportRow,
    ProfitLossReport,
    UniversityFeeReportRow,
)
from backoffice.services.reporting import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/agent-student", response_model=List[AgentStudentReportRow], summary="Agent-wise student report")
def agent_student_report(service: ReportService = Depends(deps.get_report_service)):
    return unwrap(service.agent_student_report())


@router.get("/university-fee", response_model=List[UniversityFeeReportRow], summary="University fee summary")
def university_fee_report(service: ReportService = Depends(deps.get_report_service)):
    return unwrap(service.university_fee_report())


@router.get("/profit-loss", response_model=ProfitLossReport, summary="Profit and loss for a year")
def profit_loss_report(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    service: ReportService = Depends(deps.get_report_service),
):
    return unwrap(service.profit_loss_report(year))


@router.get("/hostel-expense", response_model=List[HostelExpenseReportRow], summary="Hostel expense summary")
def hostel_expense_report(service: ReportService = Depends(deps.get_report_service)):
    return unwrap(service.hostel_expense_report())


@router.get(
    "/due-payments",
    response_model=List[DuePaymentAlert],
    summary="Due payment alerts",
    description="Outstanding ledger rows, earliest due first, with overdue severity",
)
def due_payment_alerts(
    as_of: Optional[Date] = Query(None),
    service: ReportService = Depends(deps.get_report_service),
):
    return unwrap(service.due_payment_alerts(as_of))


@router.get("/agent-commission", response_model=List[AgentCommissionReportRow], summary="Agent commission report")
def agent_commission_report(service: ReportService = Depends(deps.get_report_service)):
    return unwrap(service.agent_commission_report())


@router.get(
    "/{report_name}/export",
    response_class=Response,
    summary="Export report as CSV",
    responses={200: {"content": {"text/csv": {}}}},
)
def export_report(
    report_name: str,
    year: Optional[int] = Query(None, ge=1900, le=9999),
    as_of: Optional[Date] = Query(None),
    service: ReportService = Depends(deps.get_report_service),
):
    params = {}
    if report_name == "profit-loss":
        params["year"] = year
    elif report_name == "due-payments":
        params["as_of"] = as_of

    filename, content = unwrap(service.export_csv(report_name, **params))
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
