"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state with no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated customer from browsing to a placed order."""

    user_id: int
    product_id: int | None = None
    store_id: int | None = None
    agreed_price: float | None = None
    cart_item_ids: list[int] = field(default_factory=list)
    order_id: int | None = None


@dataclass
class RetailerState:
    """Tracks the dashboard view of one store."""

    store_id: int
    order_ids: list[int] = field(default_factory=list)
    product_ids: list[int] = field(default_factory=list)
