"""Application service: Create Order use case.

Orchestrates the flow between the catalog snapshot, the Order aggregate
and the repository.  Validation happens first and reports every
violation; only then are customer/product references resolved.
"""

from __future__ import annotations

import logging

from repuestos.application.dto import OrderDTO, to_order_dto
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.model.order import Order
from repuestos.domain.model.order_payload import OrderPayload
from repuestos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository, catalog: CatalogSnapshot) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(self, payload: OrderPayload) -> OrderDTO:
        """Create a new DRAFT order.

        Steps:
        1. Let the Order aggregate validate the payload (all violations).
        2. Resolve the customer and every product (fail if unknown).
        3. Persist; the repository assigns id and order number.
        """
        order = Order.create(payload)
        self._catalog.check_references(
            order.customer_id, [line.product_id for line in order.lines]
        )
        self._order_repo.save(order)

        logger.info(
            "Order %s created for customer %s with %d line(s)",
            order.label,
            order.customer_id,
            len(order.lines),
        )
        return to_order_dto(order, self._catalog)
