"""Application service: Load Catalog use case (query).

Fetches customers and products once and freezes them into a
CatalogSnapshot that the order use cases receive explicitly.
"""

from __future__ import annotations

from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.repository.customer_repository import CustomerRepository
from repuestos.domain.repository.product_repository import ProductRepository


class LoadCatalogHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo

    def handle(self) -> CatalogSnapshot:
        return CatalogSnapshot.of(
            customers=self._customer_repo.list_all(),
            products=self._product_repo.list_all(),
        )
