"""Checkout: turns the user's cart into an order and empties the cart.

Pricing resolution, order creation and cart clearing all happen inside the
``PlaceOrder`` handler, so they commit together in one unit of work.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.view import CartLine, snapshot
from storefront.catalogue.queries import get_store
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.exceptions import EmptyCartError
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Integer(required=True)
    store_id = Integer()
    payment_method = String(max_length=50)
    delivery_address = Text()


def _snapshot_line(line: CartLine) -> dict:
    """Price snapshot for one cart line.

    ``price`` is the undiscounted catalogue price; ``negotiated_price`` is what
    the customer pays per unit.
    """
    if line.product is not None:
        price = line.product.original_price
    else:
        price = line.service.price

    return {
        "line_type": line.item.line_type,
        "product_id": line.item.product_id,
        "service_id": line.item.service_id,
        "quantity": line.item.quantity,
        "price": price,
        "negotiated_price": line.unit_price,
    }


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        errors = {}
        if command.store_id is None:
            errors["store_id"] = ["Store ID is required"]
        if not (command.delivery_address or "").strip():
            errors["delivery_address"] = ["Delivery address is required"]
        if errors:
            raise ValidationError(errors)

        get_store(command.store_id)

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        priced = snapshot(cart)
        if priced.is_empty:
            raise EmptyCartError()

        withdrawn = [line.item.id for line in priced.lines if not line.is_available]
        if withdrawn:
            raise ValidationError(
                {"items": [f"Cart item {item_id} refers to a listing that is no longer available" for item_id in withdrawn]}
            )

        settings = get_settings()
        order = Order.place(
            user_id=command.user_id,
            store_id=command.store_id,
            lines=[_snapshot_line(line) for line in priced.lines],
            delivery_address=command.delivery_address.strip(),
            delivery_fee=settings.delivery_fee,
            tax_amount=settings.tax_amount,
            delivery_eta_minutes=settings.delivery_eta_minutes,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear(order_id=order.id)
        cart_repo.add(cart)

        logger.info(
            "order_placed",
            order_id=order.id,
            user_id=command.user_id,
            store_id=command.store_id,
            item_count=len(order.items),
            total_amount=order.total_amount,
        )
        return order.id
