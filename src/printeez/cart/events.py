"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer, String

from printeez.domain import printeez


@printeez.event(part_of="Cart")
class CartItemAdded:
    """A product was added to a cart. ``quantity`` is the line's new total."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True)
    quantity = Integer(required=True)


@printeez.event(part_of="Cart")
class CartItemQuantityUpdated:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@printeez.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True)


@printeez.event(part_of="Cart")
class CartCleared:
    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
