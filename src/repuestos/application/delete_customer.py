"""Application service: Delete Customer use case.

A customer referenced by any order, cancelled ones included, is kept:
deleting it would leave those orders pointing at nobody.
"""

from __future__ import annotations

import logging

from repuestos.domain.exceptions import EntityNotFoundError, LifecycleConflictError
from repuestos.domain.repository.customer_repository import CustomerRepository
from repuestos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._order_repo = order_repo

    def handle(self, customer_id: str) -> None:
        if self._customer_repo.get_by_id(customer_id) is None:
            raise EntityNotFoundError(f"Customer not found: '{customer_id}'")

        orders = [
            o for o in self._order_repo.list_all(include_cancelled=True)
            if o.customer_id == customer_id
        ]
        if orders:
            logger.warning(
                "Refused to delete customer %s referenced by %d order(s)", customer_id, len(orders)
            )
            raise LifecycleConflictError(
                f"Customer {customer_id} has {len(orders)} order(s) and cannot be deleted"
            )

        self._customer_repo.delete(customer_id)
        logger.info("Customer %s deleted", customer_id)
