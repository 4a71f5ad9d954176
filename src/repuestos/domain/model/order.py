"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines.  It enforces the
lifecycle:

    DRAFT ──confirm──> CONFIRMED
      │                    │
      └──────cancel────────┴──> CANCELLED (terminal)

A DRAFT order may be updated any number of times.  Once CONFIRMED its
fields are frozen; cancellation is the only way out.  Every guard runs
before any attribute is touched, so a rejected transition leaves the
order exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from repuestos.domain.exceptions import (
    InvalidCancellationError,
    LifecycleConflictError,
)
from repuestos.domain.model.order_line import OrderLine
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from repuestos.domain.model.violation import Violation
from repuestos.domain.service.order_validator import OrderValidator
from repuestos.domain.service.pricing import OrderTotals, compute_order_totals

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class CancelReason(Enum):
    CUSTOMER_REQUEST = "CUSTOMER_REQUEST"
    STOCK_ISSUE = "STOCK_ISSUE"
    PRICING_ERROR = "PRICING_ERROR"
    DUPLICATE = "DUPLICATE"
    OTHER = "OTHER"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.DRAFT: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass
class Order:
    """Aggregate root for sales orders.

    Use ``Order.create()`` for new orders — it runs the validator.  The
    ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without re-validating.

    ``id`` and ``order_number`` stay ``None`` until the repository saves
    the order for the first time.  ``version`` is bumped by the
    repository on every save and used for optimistic concurrency.
    """

    id: int | None
    customer_id: str
    order_date: date
    delivery_date: date
    lines: list[OrderLine]
    order_number: str | None = None
    status: OrderStatus = OrderStatus.DRAFT
    cancel_reason: CancelReason | None = None
    cancel_note: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(payload: OrderPayload, validator: OrderValidator | None = None) -> Order:
        """Build a new DRAFT order from a payload that passes validation."""
        parsed = (validator or OrderValidator()).parse(payload)
        return Order(
            id=None,
            customer_id=parsed.customer_id,
            order_date=parsed.order_date,
            delivery_date=parsed.delivery_date,
            lines=list(parsed.lines),
        )

    # --- State transitions ----------------------------------------------------

    def update(self, payload: OrderPayload, validator: OrderValidator | None = None) -> None:
        """Overwrite header fields and lines of a DRAFT order."""
        self._assert_editable()
        parsed = (validator or OrderValidator()).parse(payload)
        self.customer_id = parsed.customer_id
        self.order_date = parsed.order_date
        self.delivery_date = parsed.delivery_date
        self.lines = list(parsed.lines)

    def confirm(self) -> None:
        """Transition DRAFT -> CONFIRMED.

        Only a saved order can be confirmed: without an id there is no
        durable record to commit to.
        """
        if self.id is None:
            raise LifecycleConflictError("Save the order before confirming it")
        self._assert_can_transition(OrderStatus.CONFIRMED)
        self.status = OrderStatus.CONFIRMED
        logger.debug("Order %s confirmed in memory", self.label)

    def cancel(self, reason: CancelReason | str | None, note: str | None = None) -> None:
        """Transition DRAFT|CONFIRMED -> CANCELLED, recording why.

        ``OTHER`` requires a non-empty note; for every other reason the
        note is optional extra detail.
        """
        self._assert_can_transition(OrderStatus.CANCELLED)
        cancel_reason = self._parse_cancel_reason(reason)
        clean_note = note.strip() if note else ""
        if cancel_reason is CancelReason.OTHER and not clean_note:
            raise InvalidCancellationError(
                "A note is required when the cancel reason is OTHER",
                [Violation(("cancel_note",), "Describe the reason for cancelling")],
            )
        self.status = OrderStatus.CANCELLED
        self.cancel_reason = cancel_reason
        self.cancel_note = clean_note or None

    def can_transition(self, target: OrderStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[self.status]

    # --- Computed properties --------------------------------------------------

    @property
    def totals(self) -> OrderTotals:
        """Full-precision totals; lines are frozen outside DRAFT, so are these."""
        return compute_order_totals(self.lines)

    @property
    def is_saved(self) -> bool:
        return self.id is not None

    @property
    def is_editable(self) -> bool:
        return self.status == OrderStatus.DRAFT

    @property
    def label(self) -> str:
        if self.order_number:
            return self.order_number
        return f"#{self.id}" if self.id is not None else "(unsaved)"

    def to_payload(self) -> OrderPayload:
        """Current data as a payload, e.g. as the starting point of an edit."""
        return OrderPayload(
            customer_id=self.customer_id,
            order_date=self.order_date,
            delivery_date=self.delivery_date,
            lines=[
                OrderLinePayload(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    discount_pct=line.discount_pct,
                )
                for line in self.lines
            ],
        )

    # --- Internal helpers -----------------------------------------------------

    def _assert_editable(self) -> None:
        if self.status == OrderStatus.CONFIRMED:
            raise LifecycleConflictError(
                f"Order {self.label} is confirmed and can no longer be edited"
            )
        if self.status == OrderStatus.CANCELLED:
            raise LifecycleConflictError(f"Order {self.label} is cancelled")

    def _assert_can_transition(self, target: OrderStatus) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise LifecycleConflictError(f"Order {self.label} is cancelled")
        if not self.can_transition(target):
            raise LifecycleConflictError(
                f"Cannot move order {self.label} from {self.status.value} to {target.value}"
            )

    @staticmethod
    def _parse_cancel_reason(reason: CancelReason | str | None) -> CancelReason:
        if isinstance(reason, CancelReason):
            return reason
        try:
            return CancelReason(str(reason).strip().upper())
        except ValueError:
            allowed = ", ".join(r.value for r in CancelReason)
            raise InvalidCancellationError(
                f"Invalid cancel reason {reason!r}; expected one of {allowed}",
                [Violation(("cancel_reason",), f"Choose one of {allowed}")],
            ) from None

