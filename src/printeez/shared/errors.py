"""Error taxonomy for the order workflow.

Caller-input errors are Protean ValidationErrors keyed by the offending
field, so they flow through the same handlers as any other invariant
violation. OrderNotFound is an ObjectNotFoundError, and StockConflict is an
ExpectedVersionError so a placement that lost a stock race is retried.
"""

from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError


class OrderingInputError(ValidationError):
    """Base class for errors caused by the caller's order request."""

    field = "order"

    def __init__(self, message):
        super().__init__({self.field: [message]})
        self.message = message

    def __str__(self):
        return self.message


class ProductNotFound(OrderingInputError):
    field = "product_id"

    def __init__(self, product_id):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class SizeUnavailable(OrderingInputError):
    field = "size"

    def __init__(self, product_name, size):
        super().__init__(f"Size {size} is not available for {product_name}")
        self.size = size


class InsufficientStock(OrderingInputError):
    field = "quantity"

    def __init__(self, product_name, size, available, requested):
        super().__init__(
            f"Insufficient stock for {product_name} ({size}). Available: {available}, requested: {requested}"
        )
        self.available = available
        self.requested = requested


class InvalidAddress(OrderingInputError):
    field = "address"

    def __init__(self, message="Delivery address is required"):
        super().__init__(message)


class InvalidStatus(OrderingInputError):
    field = "status"

    def __init__(self, status, allowed):
        super().__init__(f"Invalid status {status!r}. Must be one of: {', '.join(allowed)}")
        self.status = status


class OrderNotFound(ObjectNotFoundError):
    def __init__(self, order_id):
        self.message = f"Order {order_id} not found"
        super().__init__(self.message)
        self.order_id = order_id

    def __str__(self):
        return self.message


class StockConflict(ExpectedVersionError):
    """Another placement changed a product's stock after it was loaded."""

    def __init__(self, product, size, requested):
        super().__init__(f"Stock for {product.name} ({size}) changed while placing the order")
        self.product_id = str(product.id)
        self.product_name = product.name
        self.size = size
        self.requested = requested


class CartNotFound(ObjectNotFoundError):
    def __init__(self):
        self.message = "Cart not found"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class CartItemNotFound(ObjectNotFoundError):
    def __init__(self, product_id, size):
        self.message = "Item not found in cart"
        super().__init__(self.message)
        self.product_id = str(product_id)
        self.size = size

    def __str__(self):
        return self.message


class WishlistNotFound(ObjectNotFoundError):
    def __init__(self):
        self.message = "Wishlist not found"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class WishlistItemNotFound(ObjectNotFoundError):
    def __init__(self, product_id):
        self.message = "Item not found in wishlist"
        super().__init__(self.message)
        self.product_id = str(product_id)

    def __str__(self):
        return self.message
