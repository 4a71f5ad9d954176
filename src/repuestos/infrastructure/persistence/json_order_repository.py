"""JSON-file-backed implementation of OrderRepository.

Line prices and discounts are stored as decimal strings at full
precision.  The rounded totals written next to them are for readers of
the file only; they are recomputed from the lines on load.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from repuestos.domain.exceptions import (
    LifecycleConflictError,
    TransportError,
    ValidationError,
)
from repuestos.domain.model.order import CancelReason, Order, OrderStatus
from repuestos.domain.model.order_line import OrderLine
from repuestos.domain.model.value_objects import round_money
from repuestos.domain.repository.order_repository import OrderRepository
from repuestos.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, order_number_prefix: str = "PED-") -> None:
        self._file = JsonFile(file_path)
        self._prefix = order_number_prefix

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_id(self._file.load())

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if self._record_id(raw) == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self, include_cancelled: bool = False) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        if include_cancelled:
            return orders
        return [o for o in orders if o.status != OrderStatus.CANCELLED]

    def save(self, order: Order) -> None:
        with self._file.locked():
            orders = self._file.load()

            index = None
            if order.id is not None:
                for i, raw in enumerate(orders):
                    if self._record_id(raw) == order.id:
                        index = i
                        break

            if index is not None and orders[index].get("version", 0) != order.version:
                raise LifecycleConflictError(
                    f"Order {order.label} was modified concurrently; reload it and try again"
                )

            order_id = order.id if order.id is not None else self._next_id(orders)
            order_number = order.order_number or f"{self._prefix}{order_id:06d}"
            version = order.version + 1

            raw = self._to_raw(order, order_id, order_number, version)
            if index is None:
                orders.append(raw)
            else:
                orders[index] = raw

            self._file.persist(orders)

        # The caller's order changes only once the write is durable.
        order.id = order_id
        order.order_number = order_number
        order.version = version

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _record_id(raw: dict) -> int:
        record_id = raw.get("id") if isinstance(raw, dict) else None
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise TransportError(f"Malformed order record without a numeric id: {raw!r}")
        return record_id

    @classmethod
    def _next_id(cls, orders: list[dict]) -> int:
        return max((cls._record_id(o) for o in orders), default=0) + 1

    @staticmethod
    def _to_raw(order: Order, order_id: int, order_number: str, version: int) -> dict:
        totals = order.totals.rounded()
        return {
            "id": order_id,
            "order_number": order_number,
            "customer_id": order.customer_id,
            "order_date": order.order_date.isoformat(),
            "delivery_date": order.delivery_date.isoformat(),
            "status": order.status.value,
            "cancel_reason": order.cancel_reason.value if order.cancel_reason else None,
            "cancel_note": order.cancel_note,
            "created_at": order.created_at.isoformat(),
            "version": version,
            "lines": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity,
                    "unit_price": str(line.unit_price),
                    "discount_pct": str(line.discount_pct),
                    "line_total": str(round_money(line.line_total)),
                }
                for line in order.lines
            ],
            "order_subtotal": str(totals.subtotal),
            "order_discount_total": str(totals.discount_total),
            "order_total": str(totals.total),
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Order:
        order_id = cls._record_id(raw)
        try:
            lines = [
                OrderLine(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    unit_price=Decimal(line["unit_price"]),
                    discount_pct=Decimal(line.get("discount_pct", "0")),
                )
                for line in raw["lines"]
            ]
            return Order(
                id=order_id,
                order_number=raw.get("order_number"),
                customer_id=raw["customer_id"],
                order_date=date.fromisoformat(raw["order_date"]),
                delivery_date=date.fromisoformat(raw["delivery_date"]),
                lines=lines,
                status=OrderStatus(raw["status"]),
                cancel_reason=(
                    CancelReason(raw["cancel_reason"]) if raw.get("cancel_reason") else None
                ),
                cancel_note=raw.get("cancel_note"),
                created_at=datetime.fromisoformat(raw["created_at"]),
                version=raw.get("version", 0),
            )
        except (
            KeyError, TypeError, AttributeError, ValueError, ArithmeticError, ValidationError
        ) as exc:
            raise TransportError(f"Malformed order record {order_id!r}: {exc}") from exc
