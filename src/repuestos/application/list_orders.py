"""Application service: List Orders use case (query).

Cancelled orders are hidden unless explicitly requested.  An optional
search term narrows the list by order number or by customer name.
"""

from __future__ import annotations

from enum import Enum

from repuestos.application.dto import OrderDTO, to_order_dto
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.repository.order_repository import OrderRepository


class SearchField(Enum):
    ORDER = "order"
    CUSTOMER = "customer"


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: CatalogSnapshot | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(
        self,
        include_cancelled: bool = False,
        search: str | None = None,
        search_field: SearchField | str = SearchField.ORDER,
    ) -> list[OrderDTO]:
        orders = self._order_repo.list_all(include_cancelled=include_cancelled)
        dtos = [to_order_dto(order, self._catalog) for order in orders]

        term = (search or "").strip().lower()
        if not term:
            return dtos
        if SearchField(search_field) is SearchField.ORDER:
            return [d for d in dtos if term in d.order_number.lower()]
        return [d for d in dtos if term in d.customer_name.lower()]
