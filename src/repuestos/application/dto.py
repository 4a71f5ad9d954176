"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are rounded
to cents here, at the presentation boundary, and never before.
"""

from __future__ import annotations

from dataclasses import dataclass

from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.model.order import Order
from repuestos.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$25.00"
    discount_pct: str  # e.g. "10"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    customer_id: str
    customer_name: str
    order_date: str
    delivery_date: str
    status: str
    lines: list[OrderLineDTO]
    subtotal: str
    discount_total: str
    total: str
    cancel_reason: str | None
    cancel_note: str | None
    created_at: str


def to_order_dto(order: Order, catalog: CatalogSnapshot | None = None) -> OrderDTO:
    """Map an order to its display form, naming customer/products when known."""
    catalog = catalog or CatalogSnapshot()
    customer = catalog.customers.get(order.customer_id)
    totals = order.totals.rounded()
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number or "",
        customer_id=order.customer_id,
        customer_name=customer.name if customer else order.customer_id,
        order_date=order.order_date.isoformat(),
        delivery_date=order.delivery_date.isoformat(),
        status=order.status.value,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=_product_name(catalog, line.product_id),
                quantity=line.quantity,
                unit_price=str(Money(line.unit_price)),
                discount_pct=f"{line.discount_pct.normalize():f}",
                line_total=str(Money(line.line_total)),
            )
            for line in order.lines
        ],
        subtotal=str(Money(totals.subtotal)),
        discount_total=str(Money(totals.discount_total)),
        total=str(Money(totals.total)),
        cancel_reason=order.cancel_reason.value if order.cancel_reason else None,
        cancel_note=order.cancel_note,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def _product_name(catalog: CatalogSnapshot, product_id: str) -> str:
    product = catalog.products.get(product_id)
    return product.name if product else product_id
