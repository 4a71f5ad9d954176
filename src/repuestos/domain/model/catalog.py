"""CatalogSnapshot — read-only view of customers and products.

The snapshot is fetched once by the caller and handed to the use cases
explicitly.  It is never refreshed mid-computation and there is no
module-level cache, so the order core can be tested without any UI or
storage harness.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from repuestos.domain.exceptions import EntityNotFoundError
from repuestos.domain.model.customer import Customer
from repuestos.domain.model.order_payload import OrderLinePayload
from repuestos.domain.model.product import Product


@dataclass(frozen=True)
class CatalogSnapshot:

    customers: Mapping[str, Customer] = field(default_factory=dict)
    products: Mapping[str, Product] = field(default_factory=dict)

    @staticmethod
    def of(customers: Iterable[Customer], products: Iterable[Product]) -> CatalogSnapshot:
        return CatalogSnapshot(
            customers=MappingProxyType({c.id: c for c in customers}),
            products=MappingProxyType({p.id: p for p in products}),
        )

    def customer(self, customer_id: str) -> Customer:
        customer = self.customers.get(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found: '{customer_id}'")
        return customer

    def product(self, product_id: str) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product

    def find_product(self, reference: str) -> Product:
        """Resolve a product by id, or else by part code (case-insensitive)."""
        if reference in self.products:
            return self.products[reference]
        for product in self.products.values():
            if product.code.lower() == reference.lower():
                return product
        raise EntityNotFoundError(f"Product not found: '{reference}'")

    def check_references(self, customer_id: str, product_ids: Iterable[str]) -> None:
        """Raise EntityNotFoundError unless every referenced id resolves."""
        self.customer(customer_id)
        for product_id in product_ids:
            self.product(product_id)

    def default_line(self, product_id: str, quantity: int = 1) -> OrderLinePayload:
        """A new line for *product_id*, priced at the current base price.

        The price is copied into the line; from then on the line owns it.
        """
        product = self.product(product_id)
        return OrderLinePayload(
            product_id=product.id,
            quantity=quantity,
            unit_price=product.base_price.amount,
            discount_pct=Decimal("0"),
        )
