"""Application tests for updating order status."""

import pytest
from protean.utils.globals import current_domain

from printeez.order.order import Order
from printeez.order.placement import place_order
from printeez.order.status import UpdateOrderStatus
from printeez.shared.errors import InvalidStatus, OrderNotFound


@pytest.fixture()
def order(make_user, make_product):
    tee = make_product(sizes={"Large": 5})
    user = make_user()
    return place_order(user.id, [{"product_id": str(tee.id), "size": "Large", "quantity": 1}], "Street 4, Lahore")


def _update(order_id, status):
    return current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)


def _status_events():
    messages = current_domain.event_store.store.read("printeez::order")
    return [
        m
        for m in messages
        if m.metadata and m.metadata.headers and m.metadata.headers.type == "Printeez.OrderStatusChanged.v1"
    ]


class TestUpdateOrderStatusHandler:
    def test_update_status(self, order):
        assert _update(order.id, "Shipped") == "Shipped"
        assert current_domain.repository_for(Order).get(order.id).status == "Shipped"
        assert len(_status_events()) == 1

    def test_setting_same_status_twice_is_idempotent(self, order):
        _update(order.id, "Shipped")
        first = current_domain.repository_for(Order).get(order.id)

        assert _update(order.id, "Shipped") == "Shipped"
        second = current_domain.repository_for(Order).get(order.id)

        assert second.status == "Shipped"
        assert second.updated_at == first.updated_at
        assert len(_status_events()) == 1

    def test_unknown_order(self):
        with pytest.raises(OrderNotFound) as exc:
            _update("no-such-order", "Shipped")
        assert exc.value.order_id == "no-such-order"
        assert "no-such-order" in str(exc.value)

    def test_invalid_status(self, order):
        with pytest.raises(InvalidStatus):
            _update(order.id, "Teleported")
        assert current_domain.repository_for(Order).get(order.id).status == "Pending"

    def test_backwards_transition_is_allowed(self, order):
        _update(order.id, "Delivered")
        _update(order.id, "Pending")
        assert current_domain.repository_for(Order).get(order.id).status == "Pending"

    def test_status_change_leaves_items_and_total_alone(self, order):
        _update(order.id, "Cancelled")
        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.total == order.total
        assert stored.items_snapshot() == order.items_snapshot()
