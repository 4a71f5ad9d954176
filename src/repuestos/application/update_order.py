"""Application service: Update Order use case.

Only DRAFT orders can be edited.  A confirmed or cancelled order is
rejected with LifecycleConflictError and left untouched.
"""

from __future__ import annotations

import logging

from repuestos.application.dto import OrderDTO, to_order_dto
from repuestos.domain.exceptions import EntityNotFoundError, LifecycleConflictError
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from repuestos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository, catalog: CatalogSnapshot) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(self, order_id: int, payload: OrderPayload) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            order.update(payload)
        except LifecycleConflictError:
            logger.warning("Rejected edit of order %s in status %s", order.label, order.status.value)
            raise

        self._catalog.check_references(
            order.customer_id, [line.product_id for line in order.lines]
        )
        self._order_repo.save(order)

        logger.info("Order %s updated", order.label)
        return to_order_dto(order, self._catalog)

    def amend(
        self,
        order_id: int,
        customer_id: str | None = None,
        order_date: str | None = None,
        delivery_date: str | None = None,
        lines: list[OrderLinePayload] | None = None,
    ) -> OrderDTO:
        """Change only the given fields; everything else keeps its stored value."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        current = order.to_payload()
        payload = OrderPayload(
            customer_id=current.customer_id if customer_id is None else customer_id,
            order_date=current.order_date if order_date is None else order_date,
            delivery_date=current.delivery_date if delivery_date is None else delivery_date,
            lines=current.lines if lines is None else lines,
        )
        return self.handle(order_id, payload)
