"""Order placement: the command, its handler and the ``place_order`` entry point.

Placing an order checks every line against current stock, snapshots product
names and prices, persists the Order and takes the ordered units out of stock.
All checks run on the loaded aggregates before anything is written, and the
Order and every stock change land in the same unit of work, so a failure on
any line leaves the catalogue exactly as it was.

Stock leaves the store through conditional writes: each size's count is only
overwritten if it still holds the value the handler loaded. When another
placement got there first the write matches nothing, the handler raises
StockConflict and Protean retries it in a fresh unit of work against the new
counts. A retry that finds too little stock fails with InsufficientStock.
"""

import json
from collections import defaultdict

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.order.order import Order, normalize_address
from printeez.product.product import Product
from printeez.shared.errors import InsufficientStock, ProductNotFound, StockConflict

logger = structlog.get_logger(__name__)


@printeez.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON list of {"product_id", "size", "quantity"}
    address = Text()


def _parse_lines(raw_items):
    try:
        lines = json.loads(raw_items)
    except (TypeError, ValueError):
        raise ValidationError({"items": ["Items must be a JSON list"]})

    if not isinstance(lines, list) or not lines:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    parsed = []
    for line in lines:
        if not isinstance(line, dict) or not line.get("product_id") or not line.get("size"):
            raise ValidationError({"items": ["Each item needs a product_id, a size and a quantity"]})

        quantity = line.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a whole number of at least 1"]})

        parsed.append((str(line["product_id"]), line["size"], quantity))
    return parsed


@printeez.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = _parse_lines(command.items)
        address = normalize_address(command.address)

        product_repo = current_domain.repository_for(Product)
        products = {}
        for product_id, _, _ in lines:
            if product_id in products:
                continue
            try:
                products[product_id] = product_repo.get_active(product_id)
            except ObjectNotFoundError:
                raise ProductNotFound(product_id)

        loaded_stock = {}
        requested = defaultdict(int)
        for product_id, size, quantity in lines:
            loaded_stock.setdefault((product_id, size), products[product_id].stock_for(size))
            requested[(product_id, size)] += quantity
        loaded_sales = {product_id: product.sales_count or 0 for product_id, product in products.items()}

        # Reserving on the loaded aggregates checks repeated lines for the
        # same product and size against the running remainder.
        for product_id, size, quantity in lines:
            products[product_id].reserve(size, quantity)

        order = Order.place(
            user_id=command.user_id,
            lines=[(products[product_id], size, quantity) for product_id, size, quantity in lines],
            address=address,
        )

        for (product_id, size), expected in loaded_stock.items():
            product = products[product_id]
            if not product_repo.take_stock(product, size, expected):
                raise StockConflict(product, size, requested[(product_id, size)])

        for product_id, product in products.items():
            if not product_repo.record_sale(product, loaded_sales[product_id]):
                size = next(s for p, s in requested if p == product_id)
                raise StockConflict(product, size, requested[(product_id, size)])

        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total,
            line_count=len(lines),
        )
        return str(order.id)


def place_order(user_id, items, address) -> Order:
    """Place an order for ``user_id`` and return the persisted Order.

    ``items`` is a list of ``{"product_id", "size", "quantity"}`` mappings.
    Raises ProductNotFound, SizeUnavailable, InsufficientStock, InvalidAddress
    or ValidationError; in every failure case no stock is touched.
    """
    command = PlaceOrder(user_id=user_id, items=json.dumps(items), address=address)
    try:
        order_id = current_domain.process(command, asynchronous=False)
    except StockConflict as exc:
        # Every retry lost its race; report the stock as it stands now.
        available = current_domain.repository_for(Product).get(exc.product_id).stock_for(exc.size)
        logger.warning(
            "order_stock_contention",
            user_id=str(user_id),
            product_id=exc.product_id,
            size=exc.size,
            available=available,
        )
        raise InsufficientStock(exc.product_name, exc.size, available=available, requested=exc.requested) from exc
    return current_domain.repository_for(Order).get(order_id)
