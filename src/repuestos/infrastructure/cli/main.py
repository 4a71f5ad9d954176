import click

from repuestos.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_update,
)
from repuestos.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_create,
    order_list,
    order_show,
    order_update,
)
from repuestos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from repuestos.infrastructure.config import get_settings
from repuestos.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override REPUESTOS_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Repuestos — sales orders for an auto-parts distributor"""
    try:
        configure_logging(log_level or get_settings().log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_update)
