"""Repository and read helpers for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from printeez import config
from printeez.domain import printeez
from printeez.order.order import Order
from printeez.shared.errors import OrderNotFound


@printeez.repository(part_of=Order)
class OrderRepository:
    def page(self, user_id=None, status=None, page=1, limit=10):
        """Orders newest-first, optionally for one user and/or status.

        Returns ``(orders, total)`` where ``total`` counts every match.
        """
        filters = {}
        if user_id:
            filters["user_id"] = user_id
        if status:
            filters["status"] = status

        query = self._dao.query
        if filters:
            query = query.filter(**filters)
        results = query.order_by("-created_at").offset((page - 1) * limit).limit(limit).all()
        return results.items, results.total


def page_size(value, default, maximum):
    """Clamp a requested page size to ``maximum``, falling back to ``default``."""
    if not value or value < 1:
        return default
    return min(value, maximum)


def list_orders_for_user(user_id, status=None, page=1, limit=None):
    limit = page_size(limit, config.USER_ORDERS_PAGE_SIZE, config.USER_ORDERS_MAX_PAGE_SIZE)
    page = max(page or 1, 1)
    return current_domain.repository_for(Order).page(user_id=user_id, status=status, page=page, limit=limit)


def list_all_orders(status=None, page=1, limit=None):
    limit = page_size(limit, config.ADMIN_ORDERS_PAGE_SIZE, config.ADMIN_ORDERS_MAX_PAGE_SIZE)
    page = max(page or 1, 1)
    return current_domain.repository_for(Order).page(status=status, page=page, limit=limit)


def get_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id)
