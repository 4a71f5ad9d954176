"""Raw, not-yet-validated order input.

Values arrive exactly as the caller typed them (form fields, CLI options,
JSON bodies): numbers may be strings, dates are usually ISO strings and any
field may be missing.  ``OrderValidator`` turns a payload into typed data or
a list of violations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _pick(raw: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in raw:
        return raw[snake]
    return raw.get(camel, default)


@dataclass(frozen=True)
class OrderLinePayload:
    product_id: Any = None
    quantity: Any = None
    unit_price: Any = None
    discount_pct: Any = None

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> OrderLinePayload:
        return OrderLinePayload(
            product_id=_pick(raw, "product_id", "productId"),
            quantity=_pick(raw, "quantity", "quantity"),
            unit_price=_pick(raw, "unit_price", "unitPrice"),
            discount_pct=_pick(raw, "discount_pct", "discountPct"),
        )


@dataclass(frozen=True)
class OrderPayload:
    """Header fields plus lines, as proposed by the caller.

    ``order_number``, ``status`` and totals are deliberately absent: they
    are never client-supplied.
    """

    customer_id: Any = None
    order_date: Any = None
    delivery_date: Any = None
    lines: list[OrderLinePayload] = field(default_factory=list)

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> OrderPayload:
        """Build a payload from a JSON-style dict (snake_case or camelCase keys)."""
        raw_lines = _pick(raw, "lines", "lines", [])
        if isinstance(raw_lines, (list, tuple)):
            # Entries that are not mappings are kept as-is for the validator to report.
            lines = [
                OrderLinePayload.from_mapping(line) if isinstance(line, Mapping) else line
                for line in raw_lines
            ]
        else:
            lines = raw_lines
        return OrderPayload(
            customer_id=_pick(raw, "customer_id", "customerId"),
            order_date=_pick(raw, "order_date", "orderDate"),
            delivery_date=_pick(raw, "delivery_date", "deliveryDate"),
            lines=lines,
        )
