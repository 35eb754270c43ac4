"""Domain events for the Cart aggregate."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product or service line was added to a cart, or an existing line grew."""

    __version__ = 1

    cart_id = Integer(required=True)
    item_id = Integer(required=True)
    line_type = String(required=True)
    product_id = Integer()
    service_id = Integer()
    quantity = Integer(required=True)
    negotiated_price = Float()


@storefront.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity of a cart line was set to a new value."""

    __version__ = 1

    cart_id = Integer(required=True)
    item_id = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    """A line was removed from a cart."""

    __version__ = 1

    cart_id = Integer(required=True)
    item_id = Integer(required=True)


@storefront.event(part_of="Cart")
class CartCleared:
    """All lines were removed because the cart was turned into an order."""

    __version__ = 1

    cart_id = Integer(required=True)
    order_id = Integer(required=True)
    item_count = Integer(required=True)
