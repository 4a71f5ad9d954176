"""OrderLine — one product entry within an order."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.value_objects import Percentage, Quantity
from repuestos.domain.service.pricing import compute_gross, compute_line_total


@dataclass(frozen=True)
class OrderLine:
    """Captures quantity, price and discount at the moment the line was entered.

    ``unit_price`` is a snapshot: it starts from the product's base price
    but is never re-read from the catalog, so later price changes do not
    affect the order.
    """

    product_id: str
    quantity: int
    unit_price: Decimal  # locked when the line is entered
    discount_pct: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not self.product_id or not self.product_id.strip():
            raise ValidationError("Line product is required")
        Quantity(self.quantity)
        Percentage(self.discount_pct)
        if not isinstance(self.unit_price, Decimal) or not self.unit_price.is_finite():
            raise ValidationError(f"Unit price must be a finite Decimal, got {self.unit_price!r}")
        if self.unit_price <= 0:
            raise ValidationError("Unit price must be greater than zero")

    @property
    def gross_total(self) -> Decimal:
        return compute_gross(self.quantity, self.unit_price)

    @property
    def line_total(self) -> Decimal:
        return compute_line_total(self.quantity, self.unit_price, self.discount_pct)
