"""Cart read side: joins cart lines with the catalogue and prices them.

A line's unit price is its negotiated price when one was captured, otherwise
the current catalogue price. Lines whose product or service has since been
withdrawn keep their slot with the listing resolved as ``None``; checkout
refuses a cart holding such a line until it is removed.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, CartItem
from storefront.catalogue.product import Product
from storefront.catalogue.service import Service
from storefront.catalogue.store import Store
from storefront.exceptions import NotFoundError


@dataclass(frozen=True)
class CartLine:
    item: CartItem
    product: Product | None = None
    service: Service | None = None
    store: Store | None = None

    @property
    def is_available(self) -> bool:
        """False once the product or service behind the line has been withdrawn."""
        return self.product is not None or self.service is not None

    @property
    def unit_price(self) -> float:
        if self.item.negotiated_price is not None:
            return self.item.negotiated_price
        if self.product is not None:
            return self.product.final_price
        if self.service is not None:
            return self.service.price
        return 0.0

    @property
    def line_total(self) -> float:
        return self.unit_price * self.item.quantity


@dataclass(frozen=True)
class CartSnapshot:
    cart: Cart
    lines: list[CartLine]

    @property
    def total_amount(self) -> float:
        return sum(line.line_total for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


def _find(aggregate_cls, identifier):
    if identifier is None:
        return None
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def _resolve_line(item: CartItem) -> CartLine:
    product = _find(Product, item.product_id)
    service = _find(Service, item.service_id)
    listing = product or service
    store = _find(Store, listing.store_id) if listing is not None else None
    return CartLine(item=item, product=product, service=service, store=store)


def snapshot(cart: Cart) -> CartSnapshot:
    """Resolve every line of ``cart`` against the catalogue, oldest line first."""
    items = sorted(cart.items, key=lambda i: i.id)
    return CartSnapshot(cart=cart, lines=[_resolve_line(item) for item in items])


def load_cart(user_id: int) -> CartSnapshot:
    """The user's priced cart, opening an empty one on first use."""
    cart = current_domain.repository_for(Cart).for_user(user_id)
    return snapshot(cart)


def get_cart_item(user_id: int, item_id: int) -> CartItem:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    item = cart.find_item(item_id)
    if item is None:
        raise NotFoundError("Cart item", item_id)
    return item
