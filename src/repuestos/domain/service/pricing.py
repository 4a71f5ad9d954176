"""Domain service: line and order total computation.

Pure arithmetic over quantity, unit price and discount percentage.
Everything is computed at full Decimal precision; rounding to cents is
left to the presentation/persistence boundary (``round_money``), so
successive sums never compound rounding error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Protocol

from repuestos.domain.model.value_objects import round_money

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

Number = Decimal | int | float | str


class PricedLine(Protocol):
    """Anything exposing the three numbers a line total depends on."""

    quantity: Number
    unit_price: Number
    discount_pct: Number


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    discount_total: Decimal
    total: Decimal

    def rounded(self) -> OrderTotals:
        return OrderTotals(
            subtotal=round_money(self.subtotal),
            discount_total=round_money(self.discount_total),
            total=round_money(self.total),
        )


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _finite_or_zero(compute) -> Decimal:
    try:
        result = compute()
    except (InvalidOperation, ValueError):
        return _ZERO
    return result if result.is_finite() else _ZERO


def compute_gross(quantity: Number, unit_price: Number) -> Decimal:
    """``quantity × unit_price`` before any discount."""
    return _finite_or_zero(lambda: _to_decimal(quantity) * _to_decimal(unit_price))


def compute_line_total(quantity: Number, unit_price: Number, discount_pct: Number) -> Decimal:
    """Return ``quantity × unit_price × (1 − discount_pct/100)``.

    A non-finite result (NaN or Infinity coming from bad upstream input)
    yields ``0`` so it is never displayed or persisted.
    """
    return _finite_or_zero(
        lambda: _to_decimal(quantity)
        * _to_decimal(unit_price)
        * (1 - _to_decimal(discount_pct) / _HUNDRED)
    )


def compute_order_totals(lines: Iterable[PricedLine]) -> OrderTotals:
    """Aggregate subtotal, discount and total over *lines*.

    ``discount_total`` is derived as ``subtotal − total`` so the three
    figures always reconcile exactly.  An empty iterable yields zeros.
    """
    subtotal = _ZERO
    total = _ZERO
    for line in lines:
        subtotal += compute_gross(line.quantity, line.unit_price)
        total += compute_line_total(line.quantity, line.unit_price, line.discount_pct)
    return OrderTotals(subtotal=subtotal, discount_total=subtotal - total, total=total)
