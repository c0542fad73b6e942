from decimal import Decimal

from backoffice.services.expense import office_monthly_total, salary_totals


def test_office_monthly_total_sums_all_lines():
    lines = {
        "rent": Decimal("25000"),
        "utilities": Decimal("3200.50"),
        "internet": Decimal("1499"),
        "marketing": None,
        "travel": Decimal("800"),
        "miscellaneous": Decimal("0.50"),
    }
    assert office_monthly_total(lines) == Decimal("30500.00")


def test_salary_totals():
    gross, net = salary_totals(Decimal("40000"), Decimal("5000"), Decimal("3500"))
    assert gross == Decimal("45000.00")
    assert net == Decimal("41500.00")
