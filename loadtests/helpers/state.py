"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State tracks IDs returned by creation endpoints so follow-up requests
can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a single simulated shopper."""

    user_id: str | None = None
    product: dict | None = None
    order_ids: list[str] = field(default_factory=list)


@dataclass
class RushState:
    """Tracks a shopper competing for a limited-stock product."""

    user_id: str | None = None
    orders_placed: int = 0
    orders_rejected: int = 0
