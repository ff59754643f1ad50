"""Sends the order confirmation once an OrderPlaced event has committed.

With ``event_processing = "sync"`` this runs right after the placement unit
of work commits. In production the Engine (``src/server.py``) picks the event
up from the outbox instead, so the HTTP response never waits on delivery.
Nothing here may raise: the order already exists, and a missing recipient or
a delivery problem only costs the customer their email.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.notifications.channel import get_channel
from printeez.notifications.templates.order_confirmation import OrderConfirmationTemplate
from printeez.order.events import OrderPlaced
from printeez.order.order import Order
from printeez.user.user import User

logger = structlog.get_logger(__name__)


@printeez.event_handler(part_of=Order)
class OrderConfirmationHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        try:
            user = current_domain.repository_for(User).get(event.user_id)
        except ObjectNotFoundError:
            logger.warning(
                "order_confirmation_skipped",
                order_id=str(event.order_id),
                user_id=str(event.user_id),
                reason="user not found",
            )
            return

        content = OrderConfirmationTemplate.render(
            {
                "order_id": str(event.order_id),
                "customer_name": user.name,
                "total": event.total,
                "payment_method": event.payment_method,
                "address": event.address,
                "placed_on": event.placed_at.strftime("%Y-%m-%d") if event.placed_at else "",
                "items": json.loads(event.items),
            }
        )

        try:
            result = get_channel().send(
                to=user.email,
                subject=content["subject"],
                body=content["body"],
                html_body=content["html_body"],
            )
        except Exception as exc:
            logger.error(
                "order_confirmation_error",
                order_id=str(event.order_id),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return

        if result.get("status") != "sent":
            logger.warning(
                "order_confirmation_failed",
                order_id=str(event.order_id),
                recipient=user.email,
                error=result.get("error"),
            )
        else:
            logger.info(
                "order_confirmation_sent",
                order_id=str(event.order_id),
                recipient=user.email,
                message_id=result.get("message_id"),
            )
