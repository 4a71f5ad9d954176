"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from repuestos.application.cancel_order import CancelOrderHandler
from repuestos.application.confirm_order import ConfirmOrderHandler
from repuestos.application.create_order import CreateOrderHandler
from repuestos.application.dto import OrderDTO
from repuestos.application.list_orders import ListOrdersHandler, SearchField
from repuestos.application.show_order import ShowOrderHandler
from repuestos.application.update_order import UpdateOrderHandler
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.model.order import CancelReason
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from repuestos.infrastructure.bootstrap import catalog_snapshot, order_repository
from repuestos.infrastructure.cli.errors import domain_errors


def _parse_lines(raw_lines: tuple[str, ...], catalog: CatalogSnapshot) -> list[OrderLinePayload]:
    """Parse 'PRODUCT:QTY[:PRICE[:DISCOUNT]]' options into line payloads.

    PRODUCT is a product id or part code.  Without PRICE the line starts
    at the product's current base price.  Numbers are passed through as
    typed; the validator decides whether they are acceptable.
    """
    lines: list[OrderLinePayload] = []
    for raw in raw_lines:
        parts = [p.strip() for p in raw.split(":")]
        if len(parts) < 2 or len(parts) > 4:
            raise click.BadParameter(
                f"Invalid line '{raw}'. Expected 'Product:Qty[:Price[:Discount]]'."
            )
        product = catalog.find_product(parts[0])
        line = catalog.default_line(product.id)
        lines.append(
            OrderLinePayload(
                product_id=product.id,
                quantity=parts[1],
                unit_price=parts[2] if len(parts) > 2 and parts[2] else line.unit_price,
                discount_pct=parts[3] if len(parts) > 3 and parts[3] else line.discount_pct,
            )
        )
    return lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (id={dto.id}, status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Dates:    ordered {dto.order_date}, delivery {dto.delivery_date}")
    if dto.cancel_reason:
        note = f" — {dto.cancel_note}" if dto.cancel_note else ""
        click.echo(f"Cancelled: {dto.cancel_reason}{note}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Disc%':>6} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<24} {line.quantity:>5} {line.unit_price:>10} "
            f"{line.discount_pct:>6} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>32}")
    click.echo(f"  {'Discount':<27} {dto.discount_total:>32}")
    click.echo(f"  {'Order Total':<27} {dto.total:>32}")


@click.command("create")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--order-date", required=True, help="Order date (YYYY-MM-DD).")
@click.option("--delivery-date", required=True, help="Delivery date (YYYY-MM-DD).")
@click.option(
    "--line", "raw_lines", multiple=True, help="Line as 'Product:Qty[:Price[:Discount]]'."
)
def order_create(customer: str, order_date: str, delivery_date: str, raw_lines: tuple[str, ...]) -> None:
    """Create a new draft order."""
    with domain_errors():
        catalog = catalog_snapshot()
        payload = OrderPayload(
            customer_id=customer,
            order_date=order_date,
            delivery_date=delivery_date,
            lines=_parse_lines(raw_lines, catalog),
        )
        dto = CreateOrderHandler(order_repository(), catalog).handle(payload)

    click.echo(f"Order {dto.order_number} created.")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to edit.")
@click.option("--customer", default=None, help="New customer ID.")
@click.option("--order-date", default=None, help="New order date (YYYY-MM-DD).")
@click.option("--delivery-date", default=None, help="New delivery date (YYYY-MM-DD).")
@click.option(
    "--line", "raw_lines", multiple=True,
    help="Replacement lines as 'Product:Qty[:Price[:Discount]]'.",
)
def order_update(
    order_id: int,
    customer: str | None,
    order_date: str | None,
    delivery_date: str | None,
    raw_lines: tuple[str, ...],
) -> None:
    """Edit a draft order. Lines are replaced only when --line is given."""
    with domain_errors():
        catalog = catalog_snapshot()
        handler = UpdateOrderHandler(order_repository(), catalog)
        dto = handler.amend(
            order_id,
            customer_id=customer,
            order_date=order_date,
            delivery_date=delivery_date,
            lines=_parse_lines(raw_lines, catalog) if raw_lines else None,
        )

    click.echo(f"Order {dto.order_number} updated.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    with domain_errors():
        dto = ShowOrderHandler(order_repository(), catalog_snapshot()).handle(order_id)

    _display_order(dto)


@click.command("list")
@click.option("--include-cancelled", is_flag=True, default=False, help="Also list cancelled orders.")
@click.option("--search", default=None, help="Text to look for.")
@click.option(
    "--search-field",
    type=click.Choice([f.value for f in SearchField], case_sensitive=False),
    default=SearchField.ORDER.value,
    show_default=True,
    help="Search by order number or by customer name.",
)
def order_list(include_cancelled: bool, search: str | None, search_field: str) -> None:
    """List orders."""
    with domain_errors():
        dtos = ListOrdersHandler(order_repository(), catalog_snapshot()).handle(
            include_cancelled, search=search, search_field=search_field.lower()
        )

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Number':<12} {'Customer':<24} {'Delivery':<11} {'Status':<10} {'Total':>12}")
    click.echo("-" * 79)
    for dto in dtos:
        click.echo(
            f"{dto.id:<5} {dto.order_number:<12} {dto.customer_name:<24} "
            f"{dto.delivery_date:<11} {dto.status:<10} {dto.total:>12}"
        )


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
def order_confirm(order_id: int) -> None:
    """Confirm a draft order. Confirmed orders can no longer be edited."""
    with domain_errors():
        dto = ConfirmOrderHandler(order_repository()).handle(order_id)

    click.echo(f"Order {dto.order_number} confirmed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.option(
    "--reason",
    required=True,
    type=click.Choice([r.value for r in CancelReason], case_sensitive=False),
    help="Why the order is cancelled.",
)
@click.option("--note", default=None, help="Free-text note (required for OTHER).")
def order_cancel(order_id: int, reason: str, note: str | None) -> None:
    """Cancel an order. The order is kept, marked CANCELLED."""
    with domain_errors():
        dto = CancelOrderHandler(order_repository()).handle(order_id, reason, note)

    click.echo(f"Order {dto.order_number} cancelled ({dto.cancel_reason}).")
