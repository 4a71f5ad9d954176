"""Domain service: Order Validator.

Checks a raw ``OrderPayload`` against the structural and business rules
of an order and reports *every* violation found, so a caller can show
all problems to the user in one pass.  Validation is pure: it never
touches persisted state.

Numeric inputs are parsed explicitly.  Text that is not a number, or a
non-finite number, is itself a violation; nothing is coerced to zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.order_line import OrderLine
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from repuestos.domain.model.violation import Violation

logger = logging.getLogger(__name__)

_MISSING = (None, "")


@dataclass(frozen=True)
class ParsedOrder:
    """Typed order data produced from a payload that passed validation."""

    customer_id: str
    order_date: date
    delivery_date: date
    lines: list[OrderLine]


# ---------------------------------------------------------------------------
# Field parsers.  Each raises ValueError with a user-facing message.
# ---------------------------------------------------------------------------


def parse_text(raw: Any, required_message: str) -> str:
    text = "" if raw is None else str(raw).strip()
    if not text:
        raise ValueError(required_message)
    return text


def parse_date(raw: Any) -> date:
    if raw in _MISSING:
        raise ValueError("Date is required")
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        raise ValueError(f"Invalid date: {raw!r}") from None


def parse_decimal(raw: Any, label: str) -> Decimal:
    if raw in _MISSING:
        raise ValueError(f"{label} is required")
    if isinstance(raw, bool):
        raise ValueError(f"{label} must be a number")
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValueError(f"{label} must be a number") from None
    if not value.is_finite():
        raise ValueError(f"{label} must be a number")
    return value


def parse_quantity(raw: Any) -> int:
    value = parse_decimal(raw, "Quantity")
    if value != value.to_integral_value():
        raise ValueError("Quantity must be a whole number")
    if value < 1:
        raise ValueError("Quantity must be at least 1")
    return int(value)


def parse_unit_price(raw: Any) -> Decimal:
    value = parse_decimal(raw, "Unit price")
    if value <= 0:
        raise ValueError("Unit price must be greater than 0")
    return value


def parse_discount(raw: Any) -> Decimal:
    # An untouched discount field means "no discount".
    if raw in _MISSING:
        return Decimal("0")
    value = parse_decimal(raw, "Discount")
    if value < 0:
        raise ValueError("Discount must be at least 0")
    if value > 100:
        raise ValueError("Discount must be at most 100")
    return value


class OrderValidator:
    """Evaluates every order rule independently and accumulates violations."""

    def validate(self, payload: OrderPayload) -> list[Violation]:
        violations, _ = self._run(payload)
        logger.debug("Order payload validated: %d violation(s)", len(violations))
        return violations

    def parse(self, payload: OrderPayload) -> ParsedOrder:
        """Return typed order data, or raise ValidationError with all violations."""
        violations, parsed = self._run(payload)
        if parsed is None:
            logger.debug("Order payload rejected: %s", "; ".join(map(str, violations)))
            raise ValidationError.from_violations(violations)
        return parsed

    # --- Rule evaluation ------------------------------------------------------

    def _run(self, payload: OrderPayload) -> tuple[list[Violation], ParsedOrder | None]:
        violations: list[Violation] = []

        def check(path: tuple[str | int, ...], parser: Callable[..., Any], *args: Any) -> Any:
            try:
                return parser(*args)
            except ValueError as exc:
                violations.append(Violation(path, str(exc)))
                return None

        customer_id = check(
            ("customer_id",), parse_text, payload.customer_id, "Customer is required"
        )
        order_date = check(("order_date",), parse_date, payload.order_date)
        delivery_date = check(("delivery_date",), parse_date, payload.delivery_date)

        if order_date is not None and delivery_date is not None and delivery_date < order_date:
            violations.append(
                Violation(("delivery_date",), "Delivery date cannot be earlier than the order date")
            )

        raw_lines = [] if payload.lines is None else payload.lines
        lines_are_list = isinstance(raw_lines, (list, tuple))
        if not lines_are_list:
            violations.append(Violation(("lines",), "Lines must be a list"))
        elif not raw_lines:
            violations.append(Violation(("lines",), "Add at least one line"))

        parsed_lines: list[OrderLine] = []
        seen_products: set[str] = set()

        for index, raw_line in enumerate(raw_lines if lines_are_list else []):
            if isinstance(raw_line, OrderLinePayload):
                line = raw_line
            elif isinstance(raw_line, Mapping):
                line = OrderLinePayload.from_mapping(raw_line)
            else:
                violations.append(Violation(("lines", index), "Invalid line"))
                continue

            before = len(violations)
            product_id = check(
                ("lines", index, "product_id"), parse_text, line.product_id, "Product is required"
            )
            quantity = check(("lines", index, "quantity"), parse_quantity, line.quantity)
            unit_price = check(("lines", index, "unit_price"), parse_unit_price, line.unit_price)
            discount = check(("lines", index, "discount_pct"), parse_discount, line.discount_pct)

            if product_id is not None:
                if product_id in seen_products:
                    violations.append(
                        Violation(("lines", index, "product_id"), "Duplicate products are not allowed")
                    )
                else:
                    seen_products.add(product_id)

            if len(violations) == before:
                parsed_lines.append(
                    OrderLine(
                        product_id=product_id,
                        quantity=quantity,
                        unit_price=unit_price,
                        discount_pct=discount,
                    )
                )

        if violations:
            return violations, None

        return violations, ParsedOrder(
            customer_id=customer_id,
            order_date=order_date,
            delivery_date=delivery_date,
            lines=parsed_lines,
        )


def validate(payload: OrderPayload) -> list[Violation]:
    """Module-level shortcut for ``OrderValidator().validate``."""
    return OrderValidator().validate(payload)

