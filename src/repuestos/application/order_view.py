"""Presentation state for an order form.

A form first shows nothing while the order is being fetched.  That
"no data yet" moment is its own phase, LOADING, instead of a missing
status, so it is never mistaken for a real lifecycle state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from repuestos.application.dto import OrderDTO
from repuestos.domain.model.order import OrderStatus
from repuestos.domain.model.violation import Violation


class ViewPhase(Enum):
    LOADING = "LOADING"
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"

    @staticmethod
    def of(status: OrderStatus | str) -> ViewPhase:
        value = status.value if isinstance(status, OrderStatus) else status
        return ViewPhase(value)


@dataclass(frozen=True)
class OrderView:
    """What the form may show and do for one order.

    - fields are editable only while DRAFT
    - "Confirm" needs a DRAFT order that has been saved
    - "Cancel" needs a saved order that is not already CANCELLED
    """

    phase: ViewPhase
    order: OrderDTO | None = None
    violations: list[Violation] = field(default_factory=list)

    @staticmethod
    def loading() -> OrderView:
        return OrderView(phase=ViewPhase.LOADING)

    @staticmethod
    def new() -> OrderView:
        """An empty form for an order that does not exist yet."""
        return OrderView(phase=ViewPhase.DRAFT)

    @staticmethod
    def of(order: OrderDTO) -> OrderView:
        return OrderView(phase=ViewPhase.of(order.status), order=order)

    def with_violations(self, violations: list[Violation]) -> OrderView:
        return OrderView(phase=self.phase, order=self.order, violations=list(violations))

    @property
    def is_saved(self) -> bool:
        return self.order is not None

    @property
    def fields_editable(self) -> bool:
        return self.phase is ViewPhase.DRAFT

    @property
    def can_save(self) -> bool:
        return self.phase is ViewPhase.DRAFT

    @property
    def can_confirm(self) -> bool:
        return self.phase is ViewPhase.DRAFT and self.is_saved

    @property
    def can_cancel(self) -> bool:
        return self.is_saved and self.phase in (ViewPhase.DRAFT, ViewPhase.CONFIRMED)

    def errors_for(self, field_name: str) -> list[str]:
        """Messages attached to one input, e.g. ``lines.0.quantity``."""
        return [v.message for v in self.violations if v.field == field_name]
