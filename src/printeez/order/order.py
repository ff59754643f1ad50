"""Order aggregate root with the OrderItem entity.

An Order is created once, atomically, by the placement workflow and is never
deleted. Line items carry the product name and unit price as they were when
the order was placed, so the total never moves with later catalogue changes.

Status values:
    Pending (initial), Shipped, Delivered, Cancelled

Intended flow is Pending → Shipped → Delivered with Cancelled reachable from
anywhere, but admins may move an order between any two statuses.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from printeez.domain import printeez
from printeez.product.product import to_cents
from printeez.shared.errors import InvalidAddress, InvalidStatus

ADDRESS_MAX_LENGTH = 200


class OrderStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def values(cls):
        return [s.value for s in cls]


class PaymentMethod(Enum):
    COD = "COD"


@printeez.entity(part_of="Order")
class OrderItem:
    """One line of an order, priced at the moment of placement."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=100)
    size = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def subtotal(self):
        return round(self.unit_price * self.quantity, 2)


@printeez.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    address = String(required=True, max_length=ADDRESS_MAX_LENGTH)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.COD.value)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime(default=lambda: datetime.now(UTC))
    updated_at = DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def place(cls, user_id, lines, address):
        """Build a Pending order from ``(product, size, quantity)`` lines.

        ``product`` is the Product aggregate as it stands at placement time;
        its name and price are copied onto the line item.
        """
        from printeez.order.events import OrderPlaced

        address = normalize_address(address)
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        items = [
            OrderItem(
                product_id=product.id,
                product_name=product.name,
                size=size,
                quantity=quantity,
                unit_price=to_cents(product.price),
            )
            for product, size, quantity in lines
        ]
        total = round(sum(item.unit_price * item.quantity for item in items), 2)

        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            items=items,
            total=total,
            address=address,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                items=json.dumps(order.items_snapshot()),
                total=total,
                address=address,
                payment_method=order.payment_method,
                status=order.status,
                placed_at=now,
            )
        )
        return order

    def items_snapshot(self):
        return [
            {
                "product_id": str(item.product_id),
                "product_name": item.product_name,
                "size": item.size,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
            }
            for item in self.items
        ]

    def update_status(self, new_status):
        """Move the order to ``new_status``. Re-applying the current status is a no-op."""
        from printeez.order.events import OrderStatusChanged

        if new_status not in OrderStatus.values():
            raise InvalidStatus(new_status, OrderStatus.values())

        if new_status == self.status:
            return

        previous = self.status
        self.status = new_status
        self.updated_at = datetime.now(UTC)
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status,
                changed_at=self.updated_at,
            )
        )


def normalize_address(address):
    """Trim ``address`` and reject empty or over-long values."""
    if not isinstance(address, str) or not address.strip():
        raise InvalidAddress()
    address = address.strip()
    if len(address) > ADDRESS_MAX_LENGTH:
        raise InvalidAddress(f"Delivery address cannot exceed {ADDRESS_MAX_LENGTH} characters")
    return address
