"""Order read side: order history for customers and retailers, and the
detailed view of a single order with its lines resolved against the catalogue.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.catalogue.service import Service
from storefront.catalogue.store import Store
from storefront.exceptions import NotFoundError
from storefront.order.order import Order, OrderItem


@dataclass(frozen=True)
class OrderLine:
    item: OrderItem
    product: Product | None = None
    service: Service | None = None


@dataclass(frozen=True)
class OrderDetails:
    order: Order
    store: Store
    lines: list[OrderLine]


def _find(aggregate_cls, identifier):
    if identifier is None:
        return None
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def get_order(order_id: int) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFoundError("Order", order_id)


def get_order_details(order_id: int) -> OrderDetails:
    """The order with its store and lines.

    Line items keep their price snapshots; the product or service is attached
    for display only and is ``None`` when it has since been withdrawn.
    """
    order = get_order(order_id)
    store = _find(Store, order.store_id)
    if store is None:
        raise NotFoundError("Order", order_id)

    lines = [
        OrderLine(
            item=item,
            product=_find(Product, item.product_id),
            service=_find(Service, item.service_id),
        )
        for item in sorted(order.items, key=lambda i: i.id)
    ]
    return OrderDetails(order=order, store=store, lines=lines)


def user_orders(user_id: int) -> list[Order]:
    return current_domain.repository_for(Order).for_user(user_id)


def store_orders(store_id: int) -> list[Order]:
    return current_domain.repository_for(Order).for_store(store_id)
