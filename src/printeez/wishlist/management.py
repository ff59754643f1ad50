"""Wishlist management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.product.product import Product
from printeez.shared.errors import WishlistNotFound
from printeez.wishlist.wishlist import Wishlist


@printeez.command(part_of="Wishlist")
class AddToWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@printeez.command(part_of="Wishlist")
class RemoveFromWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@printeez.command(part_of="Wishlist")
class ClearWishlist:
    user_id = Identifier(required=True)


@printeez.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        current_domain.repository_for(Product).get_active(command.product_id)
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id) or Wishlist(user_id=command.user_id)
        wishlist.add_product(command.product_id)
        repo.add(wishlist)
        return str(wishlist.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id)
        if wishlist is None:
            raise WishlistNotFound()
        wishlist.remove_product(command.product_id)
        repo.add(wishlist)

    @handle(ClearWishlist)
    def clear_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_user(command.user_id)
        if wishlist is None:
            raise WishlistNotFound()
        wishlist.clear()
        repo.add(wishlist)
