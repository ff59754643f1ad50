"""Tests for the Cart aggregate."""

import pytest
from protean.exceptions import ValidationError

from printeez.cart.cart import Cart, CartItem
from printeez.cart.events import CartCleared, CartItemAdded, CartItemQuantityUpdated, CartItemRemoved
from printeez.product.product import Product
from printeez.shared.errors import CartItemNotFound, InsufficientStock, SizeUnavailable


@pytest.fixture()
def tee():
    return Product.add(name="Tee", category="urban", price=20.0, sizes={"Large": 3, "Small": 1})


@pytest.fixture()
def cart():
    return Cart(user_id="user-1")


class TestAddItem:
    def test_element_types(self):
        from protean.utils import DomainObjects

        assert Cart.element_type == DomainObjects.AGGREGATE
        assert CartItem.element_type == DomainObjects.ENTITY

    def test_add_new_line(self, cart, tee):
        cart.add_item(tee, "Large", 2)

        assert len(cart.items) == 1
        assert cart.items[0].product_id == tee.id
        assert cart.items[0].size == "Large"
        assert cart.items[0].quantity == 2
        assert cart.items[0].added_at is not None

    def test_same_product_and_size_merges(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart.add_item(tee, "Large", 2)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_other_size_is_a_separate_line(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart.add_item(tee, "Small", 1)

        assert len(cart.items) == 2

    def test_merged_quantity_must_be_in_stock(self, cart, tee):
        cart.add_item(tee, "Large", 2)

        with pytest.raises(InsufficientStock) as exc:
            cart.add_item(tee, "Large", 2)
        assert exc.value.available == 3
        assert exc.value.requested == 4
        assert cart.items[0].quantity == 2

    def test_unknown_size(self, cart, tee):
        with pytest.raises(SizeUnavailable):
            cart.add_item(tee, "Medium", 1)

    def test_zero_quantity(self, cart, tee):
        with pytest.raises(ValidationError):
            cart.add_item(tee, "Large", 0)

    def test_raises_cart_item_added(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart.add_item(tee, "Large", 1)

        event = cart._events[-1]
        assert isinstance(event, CartItemAdded)
        assert event.product_id == tee.id
        assert event.quantity == 2


class TestUpdateQuantity:
    def test_update(self, cart, tee):
        cart.add_item(tee, "Large", 1)

        cart.update_quantity(tee, "Large", 3)

        assert cart.items[0].quantity == 3
        event = cart._events[-1]
        assert isinstance(event, CartItemQuantityUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 3

    def test_missing_line(self, cart, tee):
        with pytest.raises(CartItemNotFound):
            cart.update_quantity(tee, "Large", 1)

    def test_over_stock(self, cart, tee):
        cart.add_item(tee, "Small", 1)

        with pytest.raises(InsufficientStock):
            cart.update_quantity(tee, "Small", 2)


class TestRemoveAndClear:
    def test_remove_line(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart.add_item(tee, "Small", 1)

        cart.remove_item(tee.id, "Large")

        assert [item.size for item in cart.items] == ["Small"]
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_remove_missing_line_is_a_noop(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart._events.clear()

        cart.remove_item(tee.id, "Small")

        assert len(cart.items) == 1
        assert cart._events == []

    def test_clear(self, cart, tee):
        cart.add_item(tee, "Large", 1)
        cart.add_item(tee, "Small", 1)

        cart.clear()

        assert len(cart.items) == 0
        assert isinstance(cart._events[-1], CartCleared)

    def test_lines(self, cart, tee):
        cart.add_item(tee, "Large", 2)
        assert cart.lines() == [{"product_id": str(tee.id), "size": "Large", "quantity": 2}]
