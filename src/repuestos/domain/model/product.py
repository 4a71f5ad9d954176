"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, parts are added to and retired from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.value_objects import Money


@dataclass
class Product:
    """A part in the catalog.

    ``code`` is the distributor's part code (e.g. ``FIL-0042``);
    ``base_price`` is only a suggestion for new order lines.
    """

    id: str
    code: str
    name: str
    base_price: Money

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        This does NOT affect any existing orders because order lines
        capture a price snapshot when they are entered.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.base_price = new_price
