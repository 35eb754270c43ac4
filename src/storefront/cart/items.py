"""Cart item management: commands and handler.

Carts are addressed by their owner. The handler finds the user's cart (or
opens one) before applying the change, so callers never deal in cart ids.
"""

import structlog
from protean import handle
from protean.fields import Float, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.queries import get_product, get_service
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Integer(required=True)
    product_id = Integer()
    service_id = Integer()
    quantity = Integer(default=1, min_value=1)
    negotiated_price = Float()


@storefront.command(part_of="Cart")
class UpdateCartItemQuantity:
    user_id = Integer(required=True)
    item_id = Integer(required=True)
    quantity = Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Integer(required=True)
    item_id = Integer(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Unknown listings are rejected before the cart is touched
        if command.product_id is not None:
            get_product(command.product_id)
        if command.service_id is not None:
            get_service(command.service_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        item = cart.add_item(
            product_id=command.product_id,
            service_id=command.service_id,
            quantity=command.quantity,
            negotiated_price=command.negotiated_price,
        )
        repo.add(cart)

        logger.info(
            "cart_item_added",
            cart_id=cart.id,
            item_id=item.id,
            product_id=command.product_id,
            service_id=command.service_id,
            quantity=item.quantity,
        )
        return item.id

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        item = cart.update_item_quantity(
            item_id=command.item_id,
            quantity=command.quantity,
        )
        repo.add(cart)

        logger.info("cart_item_updated", cart_id=cart.id, item_id=item.id, quantity=item.quantity)
        return item.id

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        removed = cart.remove_item(item_id=command.item_id)
        if removed:
            repo.add(cart)
            logger.info("cart_item_removed", cart_id=cart.id, item_id=command.item_id)
        return removed
