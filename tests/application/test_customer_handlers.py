"""Integration tests for the customer maintenance use cases."""

import pytest

from repuestos.application.cancel_order import CancelOrderHandler
from repuestos.application.create_order import CreateOrderHandler
from repuestos.application.delete_customer import DeleteCustomerHandler
from repuestos.application.list_customers import ListCustomersHandler
from repuestos.application.update_customer import UpdateCustomerHandler
from repuestos.domain.exceptions import (
    EntityNotFoundError,
    LifecycleConflictError,
    ValidationError,
)
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from tests.fakes import FakeCustomerRepository, FakeOrderRepository, sample_catalog, sample_customers


def _place_order(order_repo, customer_id="C1"):
    return CreateOrderHandler(order_repo, sample_catalog()).handle(
        OrderPayload(
            customer_id=customer_id,
            order_date="2024-01-05",
            delivery_date="2024-01-10",
            lines=[OrderLinePayload("P1", 1, "25.00", 0)],
        )
    )


class TestUpdateCustomer:

    def test_changes_only_given_fields(self):
        repo = FakeCustomerRepository(sample_customers())
        updated = UpdateCustomerHandler(repo).handle("C1", phone=" 01 555 1234 ", city="Arequipa")

        stored = repo.get_by_id("C1")
        assert stored == updated
        assert stored.phone == "01 555 1234"
        assert stored.city == "Arequipa"
        assert stored.name == "Taller Rodríguez"

    def test_blank_optional_field_clears_it(self):
        repo = FakeCustomerRepository(sample_customers())
        UpdateCustomerHandler(repo).handle("C2", city="Lima")
        UpdateCustomerHandler(repo).handle("C2", city="  ")
        assert repo.get_by_id("C2").city is None

    def test_reports_every_invalid_field_and_keeps_customer(self):
        repo = FakeCustomerRepository(sample_customers())
        with pytest.raises(ValidationError) as exc_info:
            UpdateCustomerHandler(repo).handle("C1", name="", email="ana@")
        assert [v.field for v in exc_info.value.violations] == ["name", "email"]
        assert repo.get_by_id("C1").email == "ana@tallerrodriguez.pe"

    def test_unknown_customer(self):
        with pytest.raises(EntityNotFoundError):
            UpdateCustomerHandler(FakeCustomerRepository()).handle("C9", name="Nuevo")


class TestDeleteCustomer:

    def test_deletes_customer_without_orders(self):
        customer_repo = FakeCustomerRepository(sample_customers())
        order_repo = FakeOrderRepository()
        _place_order(order_repo, "C1")

        DeleteCustomerHandler(customer_repo, order_repo).handle("C2")

        assert customer_repo.get_by_id("C2") is None
        assert customer_repo.get_by_id("C1") is not None

    def test_refuses_customer_with_orders(self):
        customer_repo = FakeCustomerRepository(sample_customers())
        order_repo = FakeOrderRepository()
        _place_order(order_repo, "C1")

        with pytest.raises(LifecycleConflictError, match="C1 has 1 order"):
            DeleteCustomerHandler(customer_repo, order_repo).handle("C1")
        assert customer_repo.get_by_id("C1") is not None

    def test_cancelled_orders_still_count(self):
        customer_repo = FakeCustomerRepository(sample_customers())
        order_repo = FakeOrderRepository()
        dto = _place_order(order_repo, "C2")
        CancelOrderHandler(order_repo).handle(dto.id, "DUPLICATE")

        with pytest.raises(LifecycleConflictError):
            DeleteCustomerHandler(customer_repo, order_repo).handle("C2")

    def test_unknown_customer(self):
        with pytest.raises(EntityNotFoundError):
            DeleteCustomerHandler(FakeCustomerRepository(), FakeOrderRepository()).handle("C9")


class TestListCustomers:

    @pytest.mark.parametrize(
        "search, expected",
        [
            (None, ["C1", "C2"]),
            ("", ["C1", "C2"]),
            ("lima", ["C2"]),
            ("PAREDES", ["C2"]),
            ("rodríguez", ["C1"]),
            ("nadie", []),
        ],
    )
    def test_search_by_name_or_contact(self, search, expected):
        handler = ListCustomersHandler(FakeCustomerRepository(sample_customers()))
        assert [c.id for c in handler.handle(search)] == expected
