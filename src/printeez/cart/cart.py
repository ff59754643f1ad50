"""Shopping cart aggregate with the CartItem entity.

Each user has at most one cart. A cart holds product, size and quantity
only; prices are read from the catalogue whenever the cart is shown, and are
only fixed once the cart is checked out as an Order.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from printeez.cart.events import CartCleared, CartItemAdded, CartItemQuantityUpdated, CartItemRemoved
from printeez.domain import printeez
from printeez.shared.errors import CartItemNotFound, InsufficientStock, SizeUnavailable


@printeez.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    size = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@printeez.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    updated_at = DateTime(default=lambda: datetime.now(UTC))

    def item_for(self, product_id, size):
        return next(
            (i for i in self.items if str(i.product_id) == str(product_id) and i.size == size),
            None,
        )

    @staticmethod
    def _check_stock(product, size, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if product.size_stock(size) is None:
            raise SizeUnavailable(product.name, size)
        available = product.stock_for(size)
        if quantity > available:
            raise InsufficientStock(product.name, size, available=available, requested=quantity)

    def add_item(self, product, size, quantity):
        """Put ``quantity`` units of ``product`` in ``size`` in the cart.

        Adding a product and size that is already in the cart increases that
        line; the resulting quantity must still be in stock.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        existing = self.item_for(product.id, size)
        line_quantity = quantity + (existing.quantity if existing else 0)
        self._check_stock(product, size, line_quantity)

        now = datetime.now(UTC)
        if existing:
            existing.quantity = line_quantity
        else:
            self.add_items(CartItem(product_id=product.id, size=size, quantity=quantity, added_at=now))
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                user_id=self.user_id,
                product_id=product.id,
                size=size,
                quantity=line_quantity,
            )
        )

    def update_quantity(self, product, size, quantity):
        item = self.item_for(product.id, size)
        if item is None:
            raise CartItemNotFound(product.id, size)
        self._check_stock(product, size, quantity)

        previous = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=self.id,
                product_id=product.id,
                size=size,
                previous_quantity=previous,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id, size):
        """Drop a line from the cart. Removing a line that is not there is a no-op."""
        item = self.item_for(product_id, size)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartItemRemoved(cart_id=self.id, product_id=product_id, size=size))

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(cart_id=self.id, user_id=self.user_id))

    def lines(self):
        """The cart as ``{"product_id", "size", "quantity"}`` order lines."""
        return [
            {"product_id": str(item.product_id), "size": item.size, "quantity": item.quantity}
            for item in self.items
        ]
