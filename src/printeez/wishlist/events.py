"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier

from printeez.domain import printeez


@printeez.event(part_of="Wishlist")
class WishlistProductAdded:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@printeez.event(part_of="Wishlist")
class WishlistProductRemoved:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    product_id = Identifier(required=True)


@printeez.event(part_of="Wishlist")
class WishlistCleared:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
