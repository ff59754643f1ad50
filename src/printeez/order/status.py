"""Order status management: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.order.order import Order
from printeez.shared.errors import OrderNotFound


@printeez.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@printeez.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise OrderNotFound(command.order_id)

        order.update_status(command.status)
        repo.add(order)
        return order.status
