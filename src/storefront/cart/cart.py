"""Cart aggregate: a user's working selection of products and services.

Each user has at most one cart, created on first use and reused after every
checkout. A cart line is a tagged variant: a ``product`` line carries a
``product_id``, a ``service`` line carries a ``service_id``, never both.
Lines may carry a ``negotiated_price`` captured from an accepted offer, which
overrides the catalogue price for that line.

A negotiated price is taken as posted: any finite positive amount is
accepted, including one below the product's negotiation floor. The
negotiate endpoint is advisory and the cart does not re-check its outcome.
"""

import math
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from storefront.domain import storefront
from storefront.exceptions import NotFoundError
from storefront.utils.sequence import next_id


class LineType(Enum):
    PRODUCT = "product"
    SERVICE = "service"


@storefront.entity(part_of="Cart")
class CartItem:
    id = Integer(identifier=True)
    line_type = String(required=True, choices=LineType)
    product_id = Integer()
    service_id = Integer()
    quantity = Integer(min_value=1, default=1)
    negotiated_price = Float()
    added_at = DateTime()

    def matches(self, product_id, service_id):
        return self.product_id == product_id and self.service_id == service_id


def _line_type_for(product_id, service_id):
    if product_id is None and service_id is None:
        raise ValidationError({"item": ["Product ID or Service ID is required"]})
    if product_id is not None and service_id is not None:
        raise ValidationError({"item": ["A cart line references a product or a service, not both"]})
    return LineType.PRODUCT if product_id is not None else LineType.SERVICE


def _validate_quantity(quantity):
    if quantity is None or quantity < 1:
        raise ValidationError({"quantity": ["Quantity must be at least 1"]})


def _validate_negotiated_price(negotiated_price):
    if negotiated_price is None:
        return
    if not math.isfinite(negotiated_price) or negotiated_price <= 0:
        raise ValidationError({"negotiated_price": ["Negotiated price must be a positive number"]})


@storefront.aggregate
class Cart:
    id = Integer(identifier=True)
    user_id = Integer(required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def every_line_references_exactly_one_listing(self):
        for item in self.items:
            expected = LineType.PRODUCT.value if item.product_id is not None else LineType.SERVICE.value
            if (item.product_id is None) == (item.service_id is None) or item.line_type != expected:
                raise ValidationError({"items": ["Each cart line must reference exactly one product or service"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(
            id=next_id("cart", cls),
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        return next((i for i in self.items if i.id == item_id), None)

    def add_item(self, product_id=None, service_id=None, quantity=1, negotiated_price=None):
        """Add a line, or grow the existing line for the same product/service.

        A negotiated price supplied with a repeat add replaces the one already
        on the line; omitting it leaves the line's price untouched.
        """
        line_type = _line_type_for(product_id, service_id)
        _validate_quantity(quantity)
        _validate_negotiated_price(negotiated_price)

        now = datetime.now(UTC)
        existing = next((i for i in self.items if i.matches(product_id, service_id)), None)

        if existing:
            existing.quantity += quantity
            if negotiated_price is not None:
                existing.negotiated_price = negotiated_price
            item = existing
        else:
            item = CartItem(
                id=next_id("cart_item", CartItem),
                line_type=line_type.value,
                product_id=product_id,
                service_id=service_id,
                quantity=quantity,
                negotiated_price=negotiated_price,
                added_at=now,
            )
            self.add_items(item)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                item_id=item.id,
                line_type=line_type.value,
                product_id=product_id,
                service_id=service_id,
                quantity=quantity,
                negotiated_price=negotiated_price,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        """Set a line's quantity. Quantities below 1 are rejected."""
        _validate_quantity(quantity)

        item = self.find_item(item_id)
        if item is None:
            raise NotFoundError("Cart item", item_id)

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=self.id,
                item_id=item.id,
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        """Remove a line. Removing a line that is not in the cart is a no-op."""
        item = self.find_item(item_id)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=self.id, item_id=item_id))
        return True

    def clear(self, order_id):
        """Drop every line after checkout. The cart itself stays for reuse."""
        items = list(self.items)
        for item in items:
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=self.id,
                order_id=order_id,
                item_count=len(items),
            )
        )


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_for_user(self, user_id: int) -> Cart | None:
        carts = self._dao.query.filter(user_id=user_id).all().items
        if not carts:
            return None
        return min(carts, key=lambda c: c.id)

    def for_user(self, user_id: int) -> Cart:
        """The user's cart, created on first use."""
        cart = self.find_for_user(user_id)
        if cart is None:
            cart = Cart.create(user_id=user_id)
            self.add(cart)
        return cart
