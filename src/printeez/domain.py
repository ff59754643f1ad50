"""Printeez domain.

Products, users, carts, wishlists and orders share one Protean domain so
that placing an order can persist the Order and decrement Product stock
inside a single unit of work.
"""

import structlog
from protean.domain import Domain

from printeez.utils.logging import configure_logging

configure_logging()

printeez = Domain(name="printeez")

logger = structlog.get_logger(__name__)
