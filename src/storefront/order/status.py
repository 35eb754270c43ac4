"""Order status tracking: retailer-driven progress through delivery."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.exceptions import NotFoundError
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Integer(required=True)
    status = String(required=True, max_length=20)
    store_id = Integer()  # When set, the order must belong to this store


@storefront.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise NotFoundError("Order", command.order_id)

        if command.store_id is not None and order.store_id != command.store_id:
            raise NotFoundError("Order", command.order_id)

        previous_status = order.status
        order.update_status(command.status)
        repo.add(order)

        logger.info(
            "order_status_changed",
            order_id=order.id,
            previous_status=previous_status,
            new_status=order.status,
        )
        return order.id
