"""Application tests for cart item management commands."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.exceptions import NotFoundError


def _add(user_id, **kwargs):
    return current_domain.process(AddToCart(user_id=user_id, **kwargs), asynchronous=False)


def _cart(user_id):
    return current_domain.repository_for(Cart).find_for_user(user_id)


class TestAddToCartCommand:
    def test_first_add_opens_the_users_cart(self, user_id, product_id):
        assert _cart(user_id) is None
        _add(user_id, product_id=product_id)
        cart = _cart(user_id)
        assert cart.user_id == user_id
        assert len(cart.items) == 1

    def test_same_product_twice_is_one_line(self, user_id, product_id):
        _add(user_id, product_id=product_id)
        _add(user_id, product_id=product_id)
        cart = _cart(user_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_negotiated_price_persists(self, user_id, product_id):
        _add(user_id, product_id=product_id, negotiated_price=1299)
        assert _cart(user_id).items[0].negotiated_price == 1299

    def test_negotiated_price_below_floor_is_taken_as_posted(self, user_id, product_id):
        # The product floor is 1299; the cart does not re-run negotiation
        _add(user_id, product_id=product_id, negotiated_price=500)
        assert _cart(user_id).items[0].negotiated_price == 500

    def test_quantity_defaults_to_one(self, user_id, product_id):
        _add(user_id, product_id=product_id)
        assert _cart(user_id).items[0].quantity == 1

    def test_service_line(self, user_id, service_id):
        item_id = _add(user_id, service_id=service_id)
        item = _cart(user_id).find_item(item_id)
        assert item.service_id == service_id
        assert item.line_type == "service"

    def test_unknown_product_is_rejected(self, user_id):
        with pytest.raises(NotFoundError):
            _add(user_id, product_id=404)
        assert _cart(user_id) is None

    def test_unknown_service_is_rejected(self, user_id):
        with pytest.raises(NotFoundError):
            _add(user_id, service_id=404)

    def test_neither_reference_is_rejected(self, user_id):
        with pytest.raises(ValidationError):
            _add(user_id)

    def test_carts_are_per_user(self, product_id):
        _add(1, product_id=product_id)
        _add(2, product_id=product_id, quantity=3)
        assert _cart(1).items[0].quantity == 1
        assert _cart(2).items[0].quantity == 3
        assert _cart(1).id != _cart(2).id


class TestUpdateCartItemQuantityCommand:
    def test_update_quantity_persists(self, user_id, product_id):
        item_id = _add(user_id, product_id=product_id)
        current_domain.process(
            UpdateCartItemQuantity(user_id=user_id, item_id=item_id, quantity=4),
            asynchronous=False,
        )
        assert _cart(user_id).find_item(item_id).quantity == 4

    def test_quantity_below_one_is_rejected(self, user_id, product_id):
        item_id = _add(user_id, product_id=product_id)
        with pytest.raises(ValidationError):
            current_domain.process(
                UpdateCartItemQuantity(user_id=user_id, item_id=item_id, quantity=0),
                asynchronous=False,
            )

    def test_unknown_item(self, user_id):
        with pytest.raises(NotFoundError):
            current_domain.process(
                UpdateCartItemQuantity(user_id=user_id, item_id=404, quantity=2),
                asynchronous=False,
            )

    def test_other_users_items_are_not_reachable(self, product_id):
        item_id = _add(1, product_id=product_id)
        with pytest.raises(NotFoundError):
            current_domain.process(
                UpdateCartItemQuantity(user_id=2, item_id=item_id, quantity=2),
                asynchronous=False,
            )


class TestRemoveFromCartCommand:
    def test_remove_item_persists(self, user_id, product_id):
        item_id = _add(user_id, product_id=product_id)
        current_domain.process(RemoveFromCart(user_id=user_id, item_id=item_id), asynchronous=False)
        assert len(_cart(user_id).items) == 0

    def test_remove_is_idempotent(self, user_id, product_id):
        item_id = _add(user_id, product_id=product_id)
        current_domain.process(RemoveFromCart(user_id=user_id, item_id=item_id), asynchronous=False)
        removed = current_domain.process(RemoveFromCart(user_id=user_id, item_id=item_id), asynchronous=False)
        assert removed is False
