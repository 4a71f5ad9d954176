"""Application service: Add Product use case."""

from __future__ import annotations

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.product import Product
from repuestos.domain.model.value_objects import Money
from repuestos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, code: str, name: str, base_price: str) -> Product:
        """Add a new part to the catalog."""
        if not code or not code.strip():
            raise ValidationError("Product code is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if self._product_repo.get_by_code(code.strip()) is not None:
            raise ValidationError(f"Product code '{code.strip()}' already exists")

        price = Money.of(base_price)
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        numeric_ids = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product(id=next_id, code=code.strip(), name=name.strip(), base_price=price)
        self._product_repo.save(product)
        return product
