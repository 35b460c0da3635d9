"""Order total calculation.

Line totals are ``unit_price * quantity * (100 - discount_percent) / 100``.
Arithmetic runs in ``Decimal`` so totals such as 1170.00 come out exact; the
sum is rounded half-to-even to two decimal places. A missing discount counts
as zero.
"""

from decimal import ROUND_HALF_EVEN, Decimal

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal(0)
    # str() keeps 0.1 as 0.1 instead of its binary float expansion
    return Decimal(str(value))


def line_total(unit_price, quantity, discount_percent=None) -> Decimal:
    price = _decimal(unit_price)
    discount = _decimal(discount_percent)
    return price * Decimal(quantity) * (HUNDRED - discount) / HUNDRED


def calculate_total(items) -> Decimal:
    """Sum the discounted line totals of ``items``.

    An empty collection totals 0.00. ``None`` is a programming error: callers
    must pass the (possibly empty) item collection.
    """
    if items is None:
        raise ValueError("items must not be None")

    total = sum(
        (line_total(item.unit_price, item.quantity, item.discount_percent) for item in items),
        Decimal(0),
    )
    return total.quantize(CENTS, rounding=ROUND_HALF_EVEN)
