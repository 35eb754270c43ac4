"""Order aggregate: the permanent record of a checkout.

An order is assembled once from a cart and afterwards only its ``status``
(and ``updated_at``) may change. Line items carry price snapshots so that
later catalogue edits never alter a historical order.

State Machine (linear, no cancellation):
    PENDING → CONFIRMED → PACKED → ON_THE_WAY → DELIVERED
"""

import json
from datetime import UTC, datetime, timedelta
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from storefront.domain import storefront
from storefront.exceptions import InvalidTransitionError
from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.utils.sequence import next_id


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PACKED = "packed"
    ON_THE_WAY = "on_the_way"
    DELIVERED = "delivered"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: {OrderStatus.PACKED},
    OrderStatus.PACKED: {OrderStatus.ON_THE_WAY},
    OrderStatus.ON_THE_WAY: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
}

DEFAULT_PAYMENT_METHOD = "cod"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """One product or service line, frozen at checkout.

    ``price`` is the catalogue price before any discount or negotiation and
    ``negotiated_price`` is the unit price actually charged.
    """

    id = Integer(identifier=True)
    line_type = String(required=True, max_length=20)
    product_id = Integer()
    service_id = Integer()
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
    negotiated_price = Float(required=True, min_value=0.0)
    total_price = Float(required=True, min_value=0.0)

    def to_dict(self):
        return {
            "line_type": self.line_type,
            "product_id": self.product_id,
            "service_id": self.service_id,
            "quantity": self.quantity,
            "price": self.price,
            "negotiated_price": self.negotiated_price,
            "total_price": self.total_price,
        }


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    id = Integer(identifier=True)
    user_id = Integer(required=True)
    store_id = Integer(required=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    items = HasMany(OrderItem)
    total_amount = Float(required=True, min_value=0.0)
    delivery_fee = Float(default=0.0)
    tax_amount = Float(default=0.0)
    discount_amount = Float(default=0.0)
    payment_method = String(max_length=50, default=DEFAULT_PAYMENT_METHOD)
    delivery_address = Text(required=True)
    created_at = DateTime()
    updated_at = DateTime()
    estimated_delivery_time = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        user_id,
        store_id,
        lines,
        delivery_address,
        delivery_fee,
        tax_amount,
        delivery_eta_minutes,
        payment_method=None,
    ):
        """Assemble a confirmed order from priced line snapshots.

        ``lines`` is an iterable of dicts with ``line_type``, ``product_id``,
        ``service_id``, ``quantity``, ``price`` and ``negotiated_price``.
        """
        now = datetime.now(UTC)

        items = []
        for line in lines:
            quantity = line["quantity"] or 1
            items.append(
                OrderItem(
                    id=next_id("order_item", OrderItem),
                    line_type=line["line_type"],
                    product_id=line.get("product_id"),
                    service_id=line.get("service_id"),
                    quantity=quantity,
                    price=line["price"],
                    negotiated_price=line["negotiated_price"],
                    total_price=line["negotiated_price"] * quantity,
                )
            )

        order = cls(
            id=next_id("order", cls),
            user_id=user_id,
            store_id=store_id,
            status=OrderStatus.CONFIRMED.value,
            items=items,
            total_amount=sum(item.total_price for item in items),
            delivery_fee=delivery_fee,
            tax_amount=tax_amount,
            discount_amount=0.0,
            payment_method=payment_method or DEFAULT_PAYMENT_METHOD,
            delivery_address=delivery_address,
            created_at=now,
            updated_at=now,
            estimated_delivery_time=now + timedelta(minutes=delivery_eta_minutes),
        )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                store_id=store_id,
                items=json.dumps([item.to_dict() for item in items]),
                total_amount=order.total_amount,
                delivery_fee=order.delivery_fee,
                tax_amount=order.tax_amount,
                discount_amount=order.discount_amount,
                payment_method=order.payment_method,
                estimated_delivery_time=order.estimated_delivery_time,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Delivery lifecycle
    # -------------------------------------------------------------------
    def update_status(self, new_status):
        """Advance to the next delivery state.

        Only the immediately following state is accepted; staying put,
        skipping ahead, going back and unknown values all raise
        ``InvalidTransitionError``.
        """
        try:
            target_status = OrderStatus(new_status)
        except ValueError:
            raise InvalidTransitionError(self.status, str(new_status))

        self._assert_can_transition(target_status)

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = target_status.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                store_id=self.store_id,
                previous_status=previous_status,
                new_status=target_status.value,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidTransitionError(current.value, target_status.value)


@storefront.repository(part_of=Order)
class OrderRepository:
    def _newest_first(self, orders):
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def for_user(self, user_id: int) -> list[Order]:
        return self._newest_first(self._dao.query.filter(user_id=user_id).all().items)

    def for_store(self, store_id: int) -> list[Order]:
        return self._newest_first(self._dao.query.filter(store_id=store_id).all().items)
