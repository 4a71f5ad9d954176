"""Abstract repository for Order aggregate.

Implementations own the durable record, so they also own concurrency
control: ``save`` must reject a stale write (another writer saved the
same order since it was loaded) with ``LifecycleConflictError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from repuestos.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, include_cancelled: bool = False) -> list[Order]:
        """Return orders in creation order, hiding cancelled ones unless asked."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        On first save assigns ``id`` and ``order_number``.  Every save
        bumps ``version``; saving an order whose ``version`` no longer
        matches the stored one raises ``LifecycleConflictError``.
        """
