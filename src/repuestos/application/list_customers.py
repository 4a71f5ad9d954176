"""Application service: List Customers use case (query)."""

from __future__ import annotations

from repuestos.domain.model.customer import Customer
from repuestos.domain.repository.customer_repository import CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, search: str | None = None) -> list[Customer]:
        """All customers, or those whose name or contact contains *search*."""
        customers = self._customer_repo.list_all()
        term = (search or "").strip()
        if not term:
            return customers
        return [c for c in customers if c.matches(term)]
