"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from repuestos.application.add_product import AddProductHandler
from repuestos.application.update_product import UpdateProductHandler
from repuestos.infrastructure.bootstrap import product_repository
from repuestos.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--code", required=True, help="Part code (e.g. FIL-0042).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price (e.g. 15.00).")
def product_add(code: str, name: str, price: str) -> None:
    """Add a new part to the catalog."""
    with domain_errors():
        product = AddProductHandler(product_repository()).handle(
            code=code, name=name, base_price=price
        )

    click.echo(f"Product #{product.id} {product.code} '{product.name}' added at {product.base_price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    with domain_errors():
        products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Name':<24} {'Price':>10}")
    click.echo("-" * 55)
    for p in products:
        click.echo(f"{p.id:<6} {p.code:<12} {p.name:<24} {str(p.base_price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New base price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a part's base price (existing orders keep their prices)."""
    with domain_errors():
        product = UpdateProductHandler(product_repository()).handle(
            product_id=product_id, new_price=price
        )

    click.echo(f"Product #{product.id} price updated to {product.base_price}")
