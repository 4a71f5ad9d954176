"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from repuestos.domain.exceptions import TransportError
from repuestos.domain.model.customer import Customer
from repuestos.domain.repository.customer_repository import CustomerRepository
from repuestos.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, customer_id: str) -> Customer | None:
        for customer in self.list_all():
            if customer.id == customer_id:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        try:
            return [Customer(**raw) for raw in self._file.load()]
        except TypeError as exc:
            raise TransportError(f"Malformed customer record: {exc}") from exc

    def save(self, customer: Customer) -> None:
        with self._file.locked():
            records = self._file.load()
            raw = asdict(customer)
            for i, existing in enumerate(records):
                if existing.get("id") == customer.id:
                    records[i] = raw
                    break
            else:
                records.append(raw)
            self._file.persist(records)

    def delete(self, customer_id: str) -> None:
        with self._file.locked():
            records = self._file.load()
            self._file.persist([r for r in records if r.get("id") != customer_id])
