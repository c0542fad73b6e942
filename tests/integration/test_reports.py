from datetime import date
from decimal import Decimal

import pytest

from backoffice.core.exceptions import ErrorCode
from backoffice.models import (
    FeePayment,
    Hostel,
    HostelExpense,
    OfficeExpense,
    PersonalExpense,
    StaffSalary,
)
from backoffice.models.base import AlertSeverity, ExpenseStatus, PaymentStatus
from backoffice.repositories import ReportAggregateRepository
from backoffice.services.reporting import ReportService


def _payment(student, component, due, paid, status, due_date=None, last_payment_date=None):
    return FeePayment(
        student_id=student.id,
        fee_structure_component_id=component.id,
        amount_due=Decimal(due),
        amount_paid=Decimal(paid),
        payment_status=status,
        due_date=due_date,
        last_payment_date=last_payment_date,
    )


@pytest.fixture
def books(db, catalog):
    """
    Ledger: Asha paid tuition in March, owes admission since 1 March;
    Vikram part-paid tuition in April and has owed since New Year;
    Meera owes an undated admission fee. Expenses spread over 2024 plus
    one hostel bill from December 2023.
    """
    c = catalog
    db.add_all(
        [
            _payment(c.asha, c.tuition_component, "15000", "15000", PaymentStatus.PAID,
                     due_date=date(2024, 1, 1), last_payment_date=date(2024, 3, 10)),
            _payment(c.asha, c.admission_component, "2000", "0", PaymentStatus.PENDING,
                     due_date=date(2024, 3, 1)),
            _payment(c.vikram, c.tuition_component, "15000", "5000", PaymentStatus.PARTIAL,
                     due_date=date(2024, 1, 1), last_payment_date=date(2024, 4, 2)),
            _payment(c.meera, c.admission_component, "2000", "0", PaymentStatus.PENDING),
        ]
    )

    sunrise = Hostel(name="Sunrise Hostel", location="North Campus", university_id=c.northfield.id)
    lakeview = Hostel(name="Lakeview Residency", location="Lake Road")
    db.add_all([sunrise, lakeview])
    db.flush()

    db.add_all(
        [
            HostelExpense(hostel_id=sunrise.id, expense_type="Maintenance", amount=Decimal("3000"),
                          expense_date=date(2024, 3, 5), status=ExpenseStatus.PAID),
            HostelExpense(hostel_id=sunrise.id, expense_type="Laundry", amount=Decimal("500"),
                          expense_date=date(2023, 12, 1), status=ExpenseStatus.PENDING),
            OfficeExpense(location="Head Office", month="March", expense_date=date(2024, 3, 31),
                          rent=Decimal("3000"), utilities=Decimal("1000"), monthly_total=Decimal("4000")),
            StaffSalary(staff_name="Kiran", salary_month=date(2024, 3, 1), basic_salary=Decimal("6000"),
                        gross_salary=Decimal("6000"), net_salary=Decimal("6000")),
            PersonalExpense(description="Conference", amount=Decimal("1000"), expense_date=date(2024, 4, 20)),
        ]
    )
    db.commit()
    return c


@pytest.fixture
def reports(db):
    return ReportService(ReportAggregateRepository(db), db, overdue_alert_days=30)


def test_agent_student_report_includes_agents_without_students(books, reports):
    rows = reports.agent_student_report().data

    assert [r.name for r in rows] == ["Bright Futures", "Open Doors"]
    bright, idle = rows
    assert bright.student_count == 2
    assert bright.total_due == Decimal("32000.00")
    assert bright.total_paid == Decimal("20000.00")
    assert bright.total_pending == Decimal("12000.00")
    assert (idle.student_count, idle.total_due, idle.total_pending) == (0, Decimal("0.00"), Decimal("0.00"))


def test_university_fee_report(books, reports):
    rows = {r.name: r for r in reports.university_fee_report().data}

    assert rows["Northfield University"].student_count == 2
    assert rows["Northfield University"].total_pending == Decimal("12000.00")
    assert rows["Lakeside University"].student_count == 1
    assert rows["Lakeside University"].total_due == Decimal("2000.00")
    assert rows["Lakeside University"].total_paid == Decimal("0.00")


def test_profit_loss_for_year(books, reports):
    report = reports.profit_loss_report(2024).data

    assert report.total_income == Decimal("20000.00")
    assert report.expense_breakdown.hostel_expenses == Decimal("3000.00")
    assert report.expense_breakdown.office_expenses == Decimal("4000.00")
    assert report.expense_breakdown.salary_expenses == Decimal("6000.00")
    assert report.expense_breakdown.personal_expenses == Decimal("1000.00")
    assert report.total_expenses == Decimal("14000.00")
    assert report.net_profit == Decimal("6000.00")
    assert report.profit_margin == 30.0


def test_profit_loss_monthly_breakdown(books, reports):
    monthly = reports.profit_loss_report(2024).data.monthly

    assert len(monthly) == 12
    march, april = monthly[2], monthly[3]
    assert march.period == "2024-03"
    assert march.total_income == Decimal("15000.00")
    assert march.total_expenses == Decimal("13000.00")
    assert march.profit_margin == 13.3
    assert april.net_profit == Decimal("4000.00")
    assert april.profit_margin == 80.0
    assert monthly[0].total_income == Decimal("0.00")
    assert monthly[0].profit_margin == 0.0


def test_profit_loss_for_empty_year_is_zero(books, reports):
    report = reports.profit_loss_report(2019).data

    assert report.total_income == Decimal("0.00")
    assert report.total_expenses == Decimal("0.00")
    assert report.net_profit == Decimal("0.00")
    assert report.profit_margin == 0.0
    assert len(report.monthly) == 12


def test_hostel_expense_report(books, reports):
    rows = reports.hostel_expense_report().data

    assert [r.hostel_name for r in rows] == ["Lakeview Residency", "Sunrise Hostel"]
    empty, sunrise = rows
    assert empty.expense_count == 0
    assert empty.total_expenses == Decimal("0.00")
    assert empty.university_name is None
    assert sunrise.university_name == "Northfield University"
    assert sunrise.expense_count == 2
    assert sunrise.total_expenses == Decimal("3500.00")
    assert sunrise.paid_expenses == Decimal("3000.00")
    assert sunrise.pending_expenses == Decimal("500.00")


def test_due_payment_alerts(books, reports):
    alerts = reports.due_payment_alerts(as_of=date(2024, 3, 15)).data

    assert [(a.student_name, a.fee_type) for a in alerts] == [
        ("Vikram Singh", "Tuition Fee"),
        ("Asha Rao", "Admission Fee"),
        ("Meera Nair", "Admission Fee"),
    ]
    vikram, asha, meera = alerts
    assert vikram.balance == Decimal("10000.00")
    assert vikram.days_overdue == 74
    assert vikram.severity == AlertSeverity.DESTRUCTIVE
    assert asha.days_overdue == 14
    assert asha.severity == AlertSeverity.SECONDARY
    assert meera.due_date is None
    assert meera.days_overdue == 0
    assert meera.severity == AlertSeverity.SECONDARY


def test_due_payment_alerts_respect_threshold(books, db):
    strict = ReportService(ReportAggregateRepository(db), db, overdue_alert_days=10)

    alerts = strict.due_payment_alerts(as_of=date(2024, 3, 15)).data

    assert [a.severity for a in alerts] == [
        AlertSeverity.DESTRUCTIVE,
        AlertSeverity.DESTRUCTIVE,
        AlertSeverity.SECONDARY,
    ]


def test_agent_commission_report(books, reports):
    rows = {r.name: r for r in reports.agent_commission_report().data}

    assert rows["Bright Futures"].total_received == Decimal("20000.00")
    assert rows["Bright Futures"].commission_due == Decimal("2000.00")
    assert rows["Open Doors"].total_received == Decimal("0.00")
    assert rows["Open Doors"].commission_due == Decimal("0.00")


def test_reports_on_empty_books(catalog, reports):
    assert reports.due_payment_alerts().data == []
    assert reports.hostel_expense_report().data == []
    assert all(r.total_due == Decimal("0.00") for r in reports.agent_student_report().data)


def test_export_csv(books, reports):
    result = reports.export_csv("agent-student", on=date(2024, 5, 1))

    assert result.is_success
    filename, content = result.data
    assert filename == "agent-student-2024-05-01.csv"
    lines = content.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith('"agent_id","name","contact_person","student_count"')


def test_export_csv_passes_report_parameters(books, reports):
    profit_loss = reports.export_csv("profit-loss", year=2024).data[1]
    alerts = reports.export_csv("due-payments", as_of=date(2024, 3, 15)).data[1]

    assert len(profit_loss.splitlines()) == 13
    assert '"2024-03",15000.00' in profit_loss
    assert len(alerts.splitlines()) == 4
    assert '"destructive"' in alerts


def test_export_of_empty_report_is_rejected(catalog, reports):
    result = reports.export_csv("due-payments")

    assert not result.is_success
    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert result.error.message == "No data available to export"


def test_export_of_unknown_report(catalog, reports):
    result = reports.export_csv("balance-sheet")

    assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
