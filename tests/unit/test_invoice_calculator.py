from decimal import Decimal

from backoffice.models.base import DiscountType
from backoffice.services.invoice import calculate_totals


def test_percentage_discount_then_gst():
    totals = calculate_totals(
        [("Tuition Fee", Decimal("1000"), 1)],
        discount=Decimal("10"),
        discount_type=DiscountType.PERCENTAGE,
        apply_gst=True,
        gst_percentage=Decimal("18"),
    )
    assert totals.subtotal == Decimal("1000.00")
    assert totals.discount_amount == Decimal("100.00")
    assert totals.gst_amount == Decimal("162.00")
    assert totals.total_amount == Decimal("1062.00")


def test_line_amount_is_unit_times_quantity():
    totals = calculate_totals(
        [("Hostel Fee", Decimal("2500.50"), 3), ("Library", Decimal("100"), 1)],
        apply_gst=False,
    )
    assert [line.amount for line in totals.items] == [Decimal("7501.50"), Decimal("100.00")]
    assert totals.items[0].unit_price == Decimal("2500.50")
    assert totals.subtotal == Decimal("7601.50")
    assert totals.gst_amount == Decimal("0.00")
    assert totals.total_amount == Decimal("7601.50")


def test_flat_discount_never_goes_below_zero():
    totals = calculate_totals(
        [("Form", Decimal("500"), 1)],
        discount=Decimal("800"),
        discount_type=DiscountType.FIXED,
        apply_gst=True,
        gst_percentage=Decimal("18"),
    )
    assert totals.discount_amount == Decimal("800.00")
    assert totals.gst_amount == Decimal("0.00")
    assert totals.total_amount == Decimal("0.00")


def test_gst_rounds_half_up():
    totals = calculate_totals(
        [("Fee", Decimal("0.25"), 1)],
        apply_gst=True,
        gst_percentage=Decimal("10"),
    )
    # 0.025 -> 0.03
    assert totals.gst_amount == Decimal("0.03")
    assert totals.total_amount == Decimal("0.28")
