"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from repuestos.domain.exceptions import TransportError, ValidationError
from repuestos.domain.model.product import Product
from repuestos.domain.model.value_objects import Money
from repuestos.domain.repository.product_repository import ProductRepository
from repuestos.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_code(self, code: str) -> Product | None:
        for product in self._load().values():
            if product.code.lower() == code.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            return {
                item["id"]: Product(
                    id=item["id"],
                    code=item["code"],
                    name=item["name"],
                    base_price=Money(Decimal(item["base_price"]), item.get("currency", "USD")),
                )
                for item in self._file.load()
            }
        except (KeyError, TypeError, ArithmeticError, ValidationError) as exc:
            raise TransportError(f"Malformed product record: {exc}") from exc

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "code": p.code,
                    "name": p.name,
                    "base_price": str(p.base_price.amount),
                    "currency": p.base_price.currency,
                }
                for p in products.values()
            ]
        )
