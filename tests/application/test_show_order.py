"""Integration tests for the query use cases and the end-to-end flow."""

import pytest

from repuestos.application.cancel_order import CancelOrderHandler
from repuestos.application.confirm_order import ConfirmOrderHandler
from repuestos.application.create_order import CreateOrderHandler
from repuestos.application.list_orders import ListOrdersHandler, SearchField
from repuestos.application.show_order import ShowOrderHandler
from repuestos.application.update_order import UpdateOrderHandler
from repuestos.domain.exceptions import EntityNotFoundError, LifecycleConflictError
from repuestos.domain.model.order_payload import OrderLinePayload, OrderPayload
from tests.fakes import FakeOrderRepository, sample_catalog


def _payload(customer_id: str = "C1") -> OrderPayload:
    return OrderPayload(
        customer_id=customer_id,
        order_date="2024-01-05",
        delivery_date="2024-01-10",
        lines=[OrderLinePayload("P1", 2, "25.00", 0)],
    )


class TestShowOrder:

    def test_get_twice_is_identical(self):
        order_repo = FakeOrderRepository()
        catalog = sample_catalog()
        dto = CreateOrderHandler(order_repo, catalog).handle(_payload())

        show = ShowOrderHandler(order_repo, catalog)
        first, second = show.handle(dto.id), show.handle(dto.id)

        assert first == second
        assert (first.total, first.status) == ("$50.00", "DRAFT")

    def test_without_catalog_falls_back_to_ids(self):
        order_repo = FakeOrderRepository()
        dto = CreateOrderHandler(order_repo, sample_catalog()).handle(_payload())
        shown = ShowOrderHandler(order_repo).handle(dto.id)
        assert shown.customer_name == "C1"
        assert shown.lines[0].product_name == "P1"

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="#3"):
            ShowOrderHandler(FakeOrderRepository()).handle(3)


class TestListOrders:

    def test_cancelled_hidden_by_default(self):
        order_repo = FakeOrderRepository()
        create = CreateOrderHandler(order_repo, sample_catalog())
        keep = create.handle(_payload())
        drop = create.handle(_payload("C2"))
        CancelOrderHandler(order_repo).handle(drop.id, "DUPLICATE")

        handler = ListOrdersHandler(order_repo, sample_catalog())
        assert [o.id for o in handler.handle()] == [keep.id]
        assert [o.id for o in handler.handle(include_cancelled=True)] == [keep.id, drop.id]

    def test_search_by_order_number(self):
        order_repo = FakeOrderRepository()
        create = CreateOrderHandler(order_repo, sample_catalog())
        create.handle(_payload())
        second = create.handle(_payload("C2"))

        handler = ListOrdersHandler(order_repo, sample_catalog())
        assert [o.id for o in handler.handle(search="ped-000002")] == [second.id]
        assert [o.id for o in handler.handle(search="  ")] == [1, 2]

    def test_search_by_customer_name(self):
        order_repo = FakeOrderRepository()
        create = CreateOrderHandler(order_repo, sample_catalog())
        first = create.handle(_payload())
        create.handle(_payload("C2"))

        handler = ListOrdersHandler(order_repo, sample_catalog())
        found = handler.handle(search="taller", search_field=SearchField.CUSTOMER)
        assert [o.id for o in found] == [first.id]
        assert handler.handle(search="taller", search_field="order") == []

    def test_search_respects_cancelled_filter(self):
        order_repo = FakeOrderRepository()
        dto = CreateOrderHandler(order_repo, sample_catalog()).handle(_payload())
        CancelOrderHandler(order_repo).handle(dto.id, "DUPLICATE")

        handler = ListOrdersHandler(order_repo, sample_catalog())
        assert handler.handle(search="PED-000001") == []
        assert len(handler.handle(include_cancelled=True, search="PED-000001")) == 1


class TestEndToEnd:

    def test_create_confirm_then_edit_rejected(self):
        order_repo = FakeOrderRepository()
        catalog = sample_catalog()

        created = CreateOrderHandler(order_repo, catalog).handle(_payload())
        assert created.subtotal == "$50.00"
        assert created.discount_total == "$0.00"
        assert created.total == "$50.00"
        assert created.status == "DRAFT"

        confirmed = ConfirmOrderHandler(order_repo).handle(created.id)
        assert confirmed.status == "CONFIRMED"

        with pytest.raises(LifecycleConflictError):
            UpdateOrderHandler(order_repo, catalog).handle(created.id, _payload("C2"))

        shown = ShowOrderHandler(order_repo, catalog).handle(created.id)
        assert shown.customer_id == "C1"
        assert shown.status == "CONFIRMED"
        assert shown.total == "$50.00"
