"""Application service: Cancel Order use case.

DRAFT and CONFIRMED orders can be cancelled with one of the fixed
cancel reasons.  The order is kept (never deleted); its lines and
totals stay as they were at the moment of cancellation.
"""

from __future__ import annotations

import logging

from repuestos.application.dto import OrderDTO, to_order_dto
from repuestos.domain.exceptions import EntityNotFoundError, LifecycleConflictError
from repuestos.domain.model.catalog import CatalogSnapshot
from repuestos.domain.model.order import CancelReason
from repuestos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: CatalogSnapshot | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(
        self,
        order_id: int,
        reason: CancelReason | str,
        note: str | None = None,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            order.cancel(reason, note)
        except LifecycleConflictError as exc:
            logger.warning("Rejected cancellation of order %s: %s", order.label, exc)
            raise

        self._order_repo.save(order)
        logger.info("Order %s cancelled (%s)", order.label, order.cancel_reason.value)
        return to_order_dto(order, self._catalog)
