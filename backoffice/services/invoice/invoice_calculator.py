"""
Invoice arithmetic.

Pure functions; no database access.
"""

from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from backoffice.models.base import DiscountType
from backoffice.schemas.common.base import quantize_money
from backoffice.schemas.invoice import InvoiceLineItem, InvoiceTotals

ZERO = Decimal("0.00")

# (description, unit amount, quantity)
PricedItem = Tuple[str, Decimal, int]


def line_items(items: Iterable[PricedItem]) -> List[InvoiceLineItem]:
    return [
        InvoiceLineItem(
            description=description,
            quantity=quantity,
            unit_price=quantize_money(unit_price),
            amount=quantize_money(Decimal(unit_price) * quantity),
        )
        for description, unit_price, quantity in items
    ]


def calculate_totals(
    items: Iterable[PricedItem],
    discount: Decimal = ZERO,
    discount_type: DiscountType = DiscountType.PERCENTAGE,
    apply_gst: bool = True,
    gst_percentage: Optional[Decimal] = None,
) -> InvoiceTotals:
    """
    Compute subtotal, discount, GST and total.

    subtotal = sum(unit * quantity); a percentage discount is taken off the
    subtotal, a flat one as given; the discounted amount never drops below
    zero; GST applies to the discounted amount.

    >>> calculate_totals([("Tuition", Decimal("1000"), 1)], Decimal("10"),
    ...                  DiscountType.PERCENTAGE, True, Decimal("18")).total_amount
    Decimal('1062.00')
    """
    lines = line_items(items)
    subtotal = quantize_money(sum((line.amount for line in lines), ZERO))

    discount = Decimal(discount or 0)
    if discount_type == DiscountType.PERCENTAGE:
        discount_amount = quantize_money(subtotal * discount / 100)
    else:
        discount_amount = quantize_money(discount)

    after_discount = max(ZERO, subtotal - discount_amount)
    gst_amount = ZERO
    if apply_gst and gst_percentage:
        gst_amount = quantize_money(after_discount * Decimal(gst_percentage) / 100)

    return InvoiceTotals(
        items=lines,
        subtotal=subtotal,
        discount_amount=discount_amount,
        gst_amount=gst_amount,
        total_amount=quantize_money(after_discount + gst_amount),
    )
