"""Unit tests for the Order Validator."""

from datetime import date
from decimal import Decimal

import pytest

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from repuestos.domain.service.order_validator import OrderValidator, validate


def _line(product_id="P1", quantity=2, unit_price="25.00", discount_pct=0) -> OrderLinePayload:
    return OrderLinePayload(
        product_id=product_id,
        quantity=quantity,
        unit_price=unit_price,
        discount_pct=discount_pct,
    )


def _payload(**overrides) -> OrderPayload:
    fields = {
        "customer_id": "C1",
        "order_date": "2024-01-05",
        "delivery_date": "2024-01-10",
        "lines": [_line()],
    }
    fields.update(overrides)
    return OrderPayload(**fields)


def _fields(violations) -> list[str]:
    return [v.field for v in violations]


class TestValidPayload:

    def test_no_violations(self):
        assert validate(_payload()) == []

    def test_same_day_delivery_allowed(self):
        assert validate(_payload(delivery_date="2024-01-05")) == []

    def test_numbers_as_strings_are_accepted(self):
        payload = _payload(lines=[_line(quantity="3", unit_price=" 9.99 ", discount_pct="10")])
        assert validate(payload) == []

    def test_missing_discount_means_no_discount(self):
        parsed = OrderValidator().parse(_payload(lines=[_line(discount_pct=None)]))
        assert parsed.lines[0].discount_pct == Decimal("0")

    def test_parse_returns_typed_data(self):
        parsed = OrderValidator().parse(_payload())
        assert parsed.customer_id == "C1"
        assert parsed.order_date == date(2024, 1, 5)
        assert parsed.delivery_date == date(2024, 1, 10)
        assert parsed.lines[0].quantity == 2
        assert parsed.lines[0].unit_price == Decimal("25.00")


class TestHeaderRules:

    @pytest.mark.parametrize("customer_id", [None, "", "   "])
    def test_customer_required(self, customer_id):
        assert _fields(validate(_payload(customer_id=customer_id))) == ["customer_id"]

    def test_dates_required(self):
        violations = validate(_payload(order_date=None, delivery_date=""))
        assert _fields(violations) == ["order_date", "delivery_date"]

    def test_unparseable_date(self):
        violations = validate(_payload(order_date="05/01/2024"))
        assert _fields(violations) == ["order_date"]
        assert "Invalid date" in violations[0].message

    def test_date_objects_accepted(self):
        assert validate(_payload(order_date=date(2024, 1, 5), delivery_date=date(2024, 1, 6))) == []

    def test_delivery_before_order_date(self):
        violations = validate(_payload(delivery_date="2024-01-04"))
        assert len(violations) == 1
        assert violations[0].path == ("delivery_date",)

    def test_delivery_before_order_date_reported_alongside_other_problems(self):
        violations = validate(
            _payload(customer_id="", delivery_date="2024-01-01", lines=[_line(quantity=0)])
        )
        assert _fields(violations).count("delivery_date") == 1
        assert "customer_id" in _fields(violations)
        assert "lines.0.quantity" in _fields(violations)

    def test_date_order_not_checked_when_a_date_is_invalid(self):
        violations = validate(_payload(order_date="garbage", delivery_date="2020-01-01"))
        assert _fields(violations) == ["order_date"]


class TestLineRules:

    def test_at_least_one_line(self):
        assert _fields(validate(_payload(lines=[]))) == ["lines"]

    def test_each_line_field_checked(self):
        violations = validate(
            _payload(lines=[_line(product_id="", quantity=0, unit_price="0", discount_pct=101)])
        )
        assert _fields(violations) == [
            "lines.0.product_id",
            "lines.0.quantity",
            "lines.0.unit_price",
            "lines.0.discount_pct",
        ]

    @pytest.mark.parametrize("quantity", ["abc", "1.5", -1, None, True, float("nan")])
    def test_bad_quantity(self, quantity):
        assert _fields(validate(_payload(lines=[_line(quantity=quantity)]))) == ["lines.0.quantity"]

    def test_integral_decimal_quantity_accepted(self):
        parsed = OrderValidator().parse(_payload(lines=[_line(quantity="2.0")]))
        assert parsed.lines[0].quantity == 2

    @pytest.mark.parametrize("unit_price", ["-5", "0", "ten", "", "Infinity"])
    def test_bad_unit_price(self, unit_price):
        assert _fields(validate(_payload(lines=[_line(unit_price=unit_price)]))) == ["lines.0.unit_price"]

    @pytest.mark.parametrize("discount", ["-1", "100.01", "x"])
    def test_bad_discount(self, discount):
        assert _fields(validate(_payload(lines=[_line(discount_pct=discount)]))) == ["lines.0.discount_pct"]

    @pytest.mark.parametrize("discount", ["0", "100", "12.5"])
    def test_discount_bounds_inclusive(self, discount):
        assert validate(_payload(lines=[_line(discount_pct=discount)])) == []

    def test_violations_point_at_the_right_line(self):
        violations = validate(_payload(lines=[_line("P1"), _line("P2", unit_price="0")]))
        assert [v.path for v in violations] == [("lines", 1, "unit_price")]

    @pytest.mark.parametrize("entry", [None, "P1", 3, ["P1", 1]])
    def test_malformed_entry_is_a_violation(self, entry):
        violations = validate(_payload(lines=[entry, _line("P2", quantity=0)]))
        assert [(v.field, v.message) for v in violations] == [
            ("lines.0", "Invalid line"),
            ("lines.1.quantity", "Quantity must be at least 1"),
        ]

    @pytest.mark.parametrize("lines", [{"P1": 1}, "P1", 5])
    def test_lines_not_a_list(self, lines):
        violations = validate(_payload(customer_id="", lines=lines))
        assert _fields(violations) == ["customer_id", "lines"]
        assert violations[1].message == "Lines must be a list"

    def test_none_lines_means_no_lines(self):
        assert _fields(validate(_payload(lines=None))) == ["lines"]

    def test_lines_given_as_mappings(self):
        payload = OrderPayload(
            customer_id="C1",
            order_date="2024-01-05",
            delivery_date="2024-01-10",
            lines=[{"productId": "P1", "quantity": 1, "unitPrice": 10, "discountPct": 0}],
        )
        assert validate(payload) == []


class TestDuplicateProducts:

    def test_second_occurrence_flagged(self):
        violations = validate(_payload(lines=[_line("P1"), _line("P1")]))
        assert [v.path for v in violations] == [("lines", 1, "product_id")]

    def test_one_violation_per_extra_duplicate(self):
        violations = validate(_payload(lines=[_line("P1"), _line("P2"), _line("P1"), _line("P1")]))
        assert [v.path for v in violations] == [
            ("lines", 2, "product_id"),
            ("lines", 3, "product_id"),
        ]

    def test_three_identical_lines(self):
        violations = validate(_payload(lines=[_line("P1")] * 3))
        assert len(violations) == 2


class TestParse:

    def test_parse_raises_with_every_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().parse(_payload(customer_id="", lines=[]))
        assert _fields(exc_info.value.violations) == ["customer_id", "lines"]

    def test_validation_is_pure(self):
        payload = _payload(lines=[_line("P1"), _line("P1")])
        first = validate(payload)
        second = validate(payload)
        assert first == second
        assert payload.lines[0].product_id == "P1"


class TestFromMapping:

    def test_camel_case_keys(self):
        payload = OrderPayload.from_mapping(
            {
                "customerId": "C1",
                "orderDate": "2024-01-05",
                "deliveryDate": "2024-01-10",
                "lines": [{"productId": "P1", "quantity": 2, "unitPrice": 25, "discountPct": 0}],
            }
        )
        assert payload.customer_id == "C1"
        assert payload.lines[0].unit_price == 25
        assert validate(payload) == []

    def test_non_list_lines_reported(self):
        payload = OrderPayload.from_mapping(
            {"customer_id": "C1", "order_date": "2024-01-05", "delivery_date": "2024-01-10", "lines": "nope"}
        )
        assert [(v.field, v.message) for v in validate(payload)] == [("lines", "Lines must be a list")]

    def test_non_mapping_entries_reported(self):
        payload = OrderPayload.from_mapping(
            {
                "customerId": "C1",
                "orderDate": "2024-01-05",
                "deliveryDate": "2024-01-10",
                "lines": [7, {"productId": "P1", "quantity": 1, "unitPrice": 10}],
            }
        )
        assert _fields(validate(payload)) == ["lines.0"]
