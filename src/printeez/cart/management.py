"""Cart item management: commands, handler and checkout."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from printeez.cart.cart import Cart
from printeez.domain import printeez
from printeez.order.placement import place_order
from printeez.product.product import Product
from printeez.shared.errors import CartNotFound


@printeez.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)


@printeez.command(part_of="Cart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)


@printeez.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    size = String(required=True, max_length=20)


@printeez.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


@printeez.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get_active(command.product_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id) or Cart(user_id=command.user_id)
        cart.add_item(product, command.size, command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        product = current_domain.repository_for(Product).get_active(command.product_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise CartNotFound()
        cart.update_quantity(product, command.size, command.quantity)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise CartNotFound()
        cart.remove_item(command.product_id, command.size)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise CartNotFound()
        cart.clear()
        repo.add(cart)


def checkout_cart(user_id, address):
    """Place an order for everything in ``user_id``'s cart, then empty the cart.

    The cart is left untouched when placement fails, so the shopper can fix
    the offending line and try again.
    """
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise CartNotFound()
    if not cart.items:
        raise ValidationError({"items": ["Cart is empty"]})

    order = place_order(user_id=user_id, items=cart.lines(), address=address)
    current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return order
