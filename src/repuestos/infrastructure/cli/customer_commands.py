"""CLI commands for customers."""

from __future__ import annotations

import click

from repuestos.application.add_customer import AddCustomerHandler
from repuestos.application.delete_customer import DeleteCustomerHandler
from repuestos.application.list_customers import ListCustomersHandler
from repuestos.application.update_customer import UpdateCustomerHandler
from repuestos.infrastructure.bootstrap import customer_repository, order_repository
from repuestos.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--name", required=True, help="Company name.")
@click.option("--contact", required=True, help="Contact person.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--phone", required=True, help="Contact phone.")
@click.option("--address", default=None)
@click.option("--city", default=None)
@click.option("--tax-id", default=None, help="Tax identification number.")
def customer_add(
    name: str,
    contact: str,
    email: str,
    phone: str,
    address: str | None,
    city: str | None,
    tax_id: str | None,
) -> None:
    """Register a customer."""
    with domain_errors():
        customer = AddCustomerHandler(customer_repository()).handle(
            name=name,
            contact_name=contact,
            email=email,
            phone=phone,
            address=address,
            city=city,
            tax_id=tax_id,
        )

    click.echo(f"Customer {customer.id} '{customer.name}' added")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None, help="Company name.")
@click.option("--contact", default=None, help="Contact person.")
@click.option("--email", default=None, help="Contact email.")
@click.option("--phone", default=None, help="Contact phone.")
@click.option("--address", default=None, help="Address; pass '' to clear.")
@click.option("--city", default=None, help="City; pass '' to clear.")
@click.option("--tax-id", default=None, help="Tax identification number; pass '' to clear.")
def customer_update(
    customer_id: str,
    name: str | None,
    contact: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
    city: str | None,
    tax_id: str | None,
) -> None:
    """Edit a customer. Fields that are not given keep their value."""
    with domain_errors():
        customer = UpdateCustomerHandler(customer_repository()).handle(
            customer_id,
            name=name,
            contact_name=contact,
            email=email,
            phone=phone,
            address=address,
            city=city,
            tax_id=tax_id,
        )

    click.echo(f"Customer {customer.id} '{customer.name}' updated")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_delete(customer_id: str) -> None:
    """Delete a customer that no order refers to."""
    with domain_errors():
        DeleteCustomerHandler(customer_repository(), order_repository()).handle(customer_id)

    click.echo(f"Customer {customer_id} deleted")


@click.command("list")
@click.option("--search", default=None, help="Filter by company or contact name.")
def customer_list(search: str | None) -> None:
    """List customers."""
    with domain_errors():
        customers = ListCustomersHandler(customer_repository()).handle(search)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Contact':<20} {'Phone':<14}")
    click.echo("-" * 67)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<24} {c.contact_name:<20} {c.phone:<14}")
