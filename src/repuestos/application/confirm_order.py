"""Application service: Confirm Order use case."""

from __future__ import annotations

import logging

from repuestos.application.dto import OrderDTO, to_order_dto
from repuestos.domain.exceptions import EntityNotFoundError, LifecycleConflictError
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: CatalogSnapshot | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            order.confirm()
        except LifecycleConflictError:
            logger.warning("Rejected confirmation of order %s in status %s", order.label, order.status.value)
            raise

        self._order_repo.save(order)
        logger.info("Order %s confirmed", order.label)
        return to_order_dto(order, self._catalog)
