"""
Report Service

Six read-only reports recomputed from fresh rows on every call, plus CSV
export of any of them. Empty inputs yield empty lists or zero-valued
summaries, never errors.
"""

from collections import OrderedDict
from datetime import date as Date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from backoffice.config.settings import settings
from backoffice.core.exceptions import ResourceNotFoundError
from backoffice.schemas.common.base import quantize_money
from backoffice.schemas.report import (
    AgentCommissionReportRow,
    AgentStudentReportRow,
    DuePaymentAlert,
    HostelExpenseReportRow,
    ProfitLossPeriod,
    ProfitLossReport,
    UniversityFeeReportRow,
)
from backoffice.repositories.reporting import ReportAggregateRepository
from backoffice.services.base import BaseService, ServiceResult
from backoffice.services.payment.payment_rules import alert_severity, days_overdue
from backoffice.services.reporting.csv_export import export_filename, render_csv

ZERO = Decimal("0.00")

EXPENSE_SOURCES = ("hostel", "office", "salary", "personal")


def profit_margin(net_profit: Decimal, total_income: Decimal) -> float:
    """net / income * 100 rounded to one decimal; 0 without income."""
    if not total_income:
        return 0.0
    margin = (Decimal(net_profit) / Decimal(total_income) * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(margin)


def commission_due(total_received: Decimal, commission_rate: Decimal) -> Decimal:
    return quantize_money(Decimal(total_received) * Decimal(commission_rate or 0) / 100)


class ReportService(BaseService[None, ReportAggregateRepository]):
    """
    Reporting over the fee ledger and expense tables.

    Reports:
    - agent-student: ledger totals per agent
    - university-fee: ledger totals per university
    - profit-loss: yearly income vs. expenses with a monthly breakdown
    - hostel-expense: expense totals per hostel
    - due-payments: outstanding ledger rows with overdue severity
    - agent-commission: commission owed per agent
    """

    entity_name = "Report"

    def __init__(
        self,
        repository: ReportAggregateRepository,
        db_session: Session,
        overdue_alert_days: Optional[int] = None,
    ):
        super().__init__(repository, db_session)
        self.overdue_alert_days = (
            overdue_alert_days if overdue_alert_days is not None else settings.OVERDUE_ALERT_DAYS
        )
        self._exporters: Dict[str, Callable[..., ServiceResult]] = OrderedDict(
            [
                ("agent-student", self.agent_student_report),
                ("university-fee", self.university_fee_report),
                ("profit-loss", self._profit_loss_rows),
                ("hostel-expense", self.hostel_expense_report),
                ("due-payments", self.due_payment_alerts),
                ("agent-commission", self.agent_commission_report),
            ]
        )

    # -------------------------------------------------------------------------
    # Ledger totals
    # -------------------------------------------------------------------------

    def agent_student_report(self) -> ServiceResult[List[AgentStudentReportRow]]:
        try:
            rows = [
                AgentStudentReportRow(**row, total_pending=row["total_due"] - row["total_paid"])
                for row in self.repository.agent_student_totals()
            ]
            return ServiceResult.success(rows)
        except Exception as e:
            return self._handle_exception(e, "build agent-student report")

    def university_fee_report(self) -> ServiceResult[List[UniversityFeeReportRow]]:
        try:
            rows = [
                UniversityFeeReportRow(**row, total_pending=row["total_due"] - row["total_paid"])
                for row in self.repository.university_fee_totals()
            ]
            return ServiceResult.success(rows)
        except Exception as e:
            return self._handle_exception(e, "build university fee report")

    # -------------------------------------------------------------------------
    # Profit & loss
    # -------------------------------------------------------------------------

    def profit_loss_report(self, year: Optional[int] = None) -> ServiceResult[ProfitLossReport]:
        """
        Income is the amount paid on ledger rows whose last payment falls
        in the year; expenses are hostel, office (monthly total), salary
        (net) and personal expenses dated in the year.
        """
        year = year or Date.today().year
        try:
            start, end = Date(year, 1, 1), Date(year, 12, 31)
            income = self.repository.income_entries(start, end)
            expenses = self.repository.expense_entries(start, end)

            monthly = [
                self._period(
                    f"{year}-{month:02d}",
                    [amount for day, amount in income if day.month == month],
                    {k: [amount for day, amount in expenses.get(k, []) if day.month == month] for k in EXPENSE_SOURCES},
                )
                for month in range(1, 13)
            ]
            annual = self._period(
                str(year),
                [amount for _, amount in income],
                {k: [amount for _, amount in expenses.get(k, [])] for k in EXPENSE_SOURCES},
            )

            report = ProfitLossReport(
                year=year,
                total_income=annual.total_income,
                total_expenses=annual.total_expenses,
                net_profit=annual.net_profit,
                profit_margin=annual.profit_margin,
                expense_breakdown=annual,
                monthly=monthly,
            )
            return ServiceResult.success(report)
        except Exception as e:
            return self._handle_exception(e, "build profit and loss report", year)

    @staticmethod
    def _period(label: str, income: List[Decimal], expenses: Dict[str, List[Decimal]]) -> ProfitLossPeriod:
        totals = {k: quantize_money(sum(expenses.get(k, []), ZERO)) for k in EXPENSE_SOURCES}
        total_income = quantize_money(sum(income, ZERO))
        total_expenses = quantize_money(sum(totals.values(), ZERO))
        net = total_income - total_expenses
        return ProfitLossPeriod(
            period=label,
            total_income=total_income,
            hostel_expenses=totals["hostel"],
            office_expenses=totals["office"],
            salary_expenses=totals["salary"],
            personal_expenses=totals["personal"],
            total_expenses=total_expenses,
            net_profit=net,
            profit_margin=profit_margin(net, total_income),
        )

    def _profit_loss_rows(self, year: Optional[int] = None) -> ServiceResult[List[ProfitLossPeriod]]:
        result = self.profit_loss_report(year)
        if not result.is_success:
            return result
        return ServiceResult.success(result.data.monthly)

    # -------------------------------------------------------------------------
    # Hostels
    # -------------------------------------------------------------------------

    def hostel_expense_report(self) -> ServiceResult[List[HostelExpenseReportRow]]:
        try:
            rows = [HostelExpenseReportRow(**row) for row in self.repository.hostel_expense_totals()]
            return ServiceResult.success(rows)
        except Exception as e:
            return self._handle_exception(e, "build hostel expense report")

    # -------------------------------------------------------------------------
    # Due payments
    # -------------------------------------------------------------------------

    def due_payment_alerts(self, as_of: Optional[Date] = None) -> ServiceResult[List[DuePaymentAlert]]:
        """
        Outstanding ledger rows, earliest due first (undated last).

        Rows more than the configured number of days overdue are flagged
        destructive, the rest secondary.
        """
        as_of = as_of or Date.today()
        try:
            alerts = []
            for row in self.repository.outstanding_ledger_rows():
                overdue = days_overdue(row["due_date"], as_of)
                alerts.append(
                    DuePaymentAlert(
                        **row,
                        balance=row["amount_due"] - row["amount_paid"],
                        days_overdue=overdue,
                        severity=alert_severity(overdue, self.overdue_alert_days),
                    )
                )

            alerts.sort(key=self._due_sort_key)
            return ServiceResult.success(alerts)
        except Exception as e:
            return self._handle_exception(e, "build due payment alerts")

    @staticmethod
    def _due_sort_key(alert: DuePaymentAlert) -> Tuple[bool, Date, str]:
        return (alert.due_date is None, alert.due_date or Date.max, alert.student_name)

    # -------------------------------------------------------------------------
    # Commission
    # -------------------------------------------------------------------------

    def agent_commission_report(self) -> ServiceResult[List[AgentCommissionReportRow]]:
        try:
            rows = [
                AgentCommissionReportRow(
                    **row,
                    commission_due=commission_due(row["total_received"], row["commission_rate"]),
                )
                for row in self.repository.agent_received_totals()
            ]
            return ServiceResult.success(rows)
        except Exception as e:
            return self._handle_exception(e, "build agent commission report")

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export_csv(
        self,
        report_name: str,
        on: Optional[Date] = None,
        **params: Any,
    ) -> ServiceResult[Tuple[str, str]]:
        """
        Render one report as CSV.

        Returns:
            ServiceResult containing (filename, csv_text)
        """
        try:
            builder = self._exporters.get(report_name)
            if builder is None:
                raise ResourceNotFoundError("Report", report_name)

            result = builder(**params)
            if not result.is_success:
                return result

            rows = [row.model_dump() for row in result.data]
            content = render_csv(rows)
            filename = export_filename(report_name, on)
            self._logger.info(
                "Report exported",
                extra={"report": report_name, "rows": len(rows), "export_filename": filename},
            )
            return ServiceResult.success((filename, content))
        except Exception as e:
            return self._handle_exception(e, "export report", report_name)
