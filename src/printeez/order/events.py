"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from printeez.domain import printeez


@printeez.event(part_of="Order")
class OrderPlaced:
    """A new order was persisted and its stock reserved.

    ``items`` is a JSON list of line-item snapshots.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    items = Text(required=True)
    total = Float(required=True)
    address = String(required=True, max_length=200)
    payment_method = String(required=True)
    status = String(required=True)
    placed_at = DateTime(required=True)


@printeez.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
