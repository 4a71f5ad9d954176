"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from repuestos.application.load_catalog import LoadCatalogHandler
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.infrastructure.config import get_settings
from repuestos.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from repuestos.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from repuestos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(get_settings().data_dir / "customers.json")


def order_repository() -> JsonOrderRepository:
    settings = get_settings()
    return JsonOrderRepository(
        settings.data_dir / "orders.json",
        order_number_prefix=settings.order_number_prefix,
    )


def catalog_snapshot() -> CatalogSnapshot:
    return LoadCatalogHandler(customer_repository(), product_repository()).handle()
