"""Report schemas."""

from backoffice.schemas.report.report import (
    AgentCommissionReportRow,
    AgentStudentReportRow,
    DuePaymentAlert,
    HostelExpenseReportRow,
    ProfitLossPeriod,
    ProfitLossReport,
    UniversityFeeReportRow,
)

__all__ = [
    "AgentCommissionReportRow",
    "AgentStudentReportRow",
    "DuePaymentAlert",
    "HostelExpenseReportRow",
    "ProfitLossPeriod",
    "ProfitLossReport",
    "UniversityFeeReportRow",
]
