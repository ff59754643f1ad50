"""Every aggregate, command and handler is picked up when the domain initializes."""

import pytest

from printeez.cart.cart import Cart, CartItem
from printeez.cart.management import AddToCart, ManageCartHandler
from printeez.domain import printeez
from printeez.notifications.order_events import OrderConfirmationHandler
from printeez.order.order import Order, OrderItem
from printeez.order.placement import PlaceOrder, PlaceOrderHandler
from printeez.order.status import UpdateOrderStatus
from printeez.product.creation import AddProduct
from printeez.product.management import DiscontinueProduct, ManageProductHandler, UpdateProductDetails
from printeez.product.product import Product, SizeStock
from printeez.user.registration import RegisterUser
from printeez.user.user import User
from printeez.wishlist.management import AddToWishlist, ManageWishlistHandler
from printeez.wishlist.wishlist import Wishlist, WishlistEntry


def _registered(element_type):
    return set(printeez.registry.elements.get(element_type, []))


@pytest.mark.parametrize("aggregate", [Product, User, Cart, Wishlist, Order])
def test_aggregates_are_registered(aggregate):
    assert aggregate in _registered("aggregates")


@pytest.mark.parametrize("entity", [SizeStock, CartItem, WishlistEntry, OrderItem])
def test_child_entities_are_registered(entity):
    assert entity in _registered("entities")


@pytest.mark.parametrize(
    "command",
    [
        AddProduct,
        UpdateProductDetails,
        DiscontinueProduct,
        RegisterUser,
        AddToCart,
        AddToWishlist,
        PlaceOrder,
        UpdateOrderStatus,
    ],
)
def test_commands_carry_a_type(command):
    assert command.__type__ == f"Printeez.{command.__name__}.v1"


@pytest.mark.parametrize(
    "handler",
    [PlaceOrderHandler, ManageProductHandler, ManageCartHandler, ManageWishlistHandler],
)
def test_command_handlers_are_registered(handler):
    assert handler in _registered("command_handlers")


def test_order_confirmation_handler_is_registered():
    assert OrderConfirmationHandler in _registered("event_handlers")


def test_place_order_command_is_routed(make_user, make_product):
    from printeez.order.placement import place_order

    tee = make_product(name="Tee", sizes={"Large": 2})
    order = place_order(
        make_user().id,
        [{"product_id": str(tee.id), "size": "Large", "quantity": 1}],
        "House 1, Street 2, Lahore",
    )
    assert order.status == "Pending"
