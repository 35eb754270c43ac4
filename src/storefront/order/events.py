"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was assembled from a user's cart at checkout."""

    __version__ = 1

    order_id = Integer(required=True)
    user_id = Integer(required=True)
    store_id = Integer(required=True)
    items = Text(required=True)  # JSON: list of item snapshots
    total_amount = Float(required=True)
    delivery_fee = Float(required=True)
    tax_amount = Float(required=True)
    discount_amount = Float(required=True)
    payment_method = String(required=True)
    estimated_delivery_time = DateTime()
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An order moved one step along the delivery lifecycle."""

    __version__ = 1

    order_id = Integer(required=True)
    store_id = Integer(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
