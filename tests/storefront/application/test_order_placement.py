"""Application tests for checkout: cart to order."""

from datetime import timedelta

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.cart.items import AddToCart, RemoveFromCart
from storefront.cart.view import load_cart
from storefront.catalogue.management import RemoveProduct
from storefront.exceptions import EmptyCartError, NotFoundError
from storefront.order.order import Order, OrderStatus
from storefront.order.placement import PlaceOrder


def _add(user_id, **kwargs):
    return current_domain.process(AddToCart(user_id=user_id, **kwargs), asynchronous=False)


def _place(user_id, store_id, **overrides):
    defaults = {
        "user_id": user_id,
        "store_id": store_id,
        "delivery_address": "123 Main St, City",
    }
    defaults.update(overrides)
    return current_domain.process(PlaceOrder(**defaults), asynchronous=False)


def _order(order_id):
    return current_domain.repository_for(Order).get(order_id)


class TestPlaceOrder:
    def test_order_is_confirmed_with_fees(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id)
        order = _order(_place(user_id, store_id))
        assert order.status == OrderStatus.CONFIRMED.value
        assert order.total_amount == 1599
        assert order.delivery_fee == 49
        assert order.tax_amount == 29
        assert order.discount_amount == 0
        assert order.payment_method == "cod"
        assert order.estimated_delivery_time - order.created_at == timedelta(minutes=45)

    def test_cart_is_emptied_but_kept(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id)
        cart_id = load_cart(user_id).cart.id
        _place(user_id, store_id)
        snapshot = load_cart(user_id)
        assert snapshot.cart.id == cart_id
        assert snapshot.lines == []

    def test_item_snapshots(self, user_id, store_id, product_id, service_id):
        _add(user_id, product_id=product_id, quantity=2, negotiated_price=1299)
        _add(user_id, service_id=service_id)
        order = _order(_place(user_id, store_id))

        items = sorted(order.items, key=lambda i: i.id)
        product_item, service_item = items
        assert product_item.price == 1999
        assert product_item.negotiated_price == 1299
        assert product_item.total_price == 2598
        assert service_item.price == 299
        assert service_item.negotiated_price == 299
        for item in items:
            assert item.total_price == item.negotiated_price * item.quantity
        assert order.total_amount == 2598 + 299

    def test_line_without_negotiation_uses_final_price(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id)
        item = _order(_place(user_id, store_id)).items[0]
        assert item.price == 1999
        assert item.negotiated_price == 1599

    def test_order_is_unaffected_by_later_catalogue_changes(self, user_id, store_id, product_id):
        from storefront.catalogue.product import Product

        _add(user_id, product_id=product_id)
        order_id = _place(user_id, store_id)

        repo = current_domain.repository_for(Product)
        product = repo.get(product_id)
        product.final_price = 999
        repo.add(product)

        assert _order(order_id).items[0].negotiated_price == 1599

    def test_payment_method_is_recorded(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id)
        assert _order(_place(user_id, store_id, payment_method="upi")).payment_method == "upi"

    def test_fees_follow_configuration(self, monkeypatch, user_id, store_id, product_id):
        from storefront.config import reset_settings

        monkeypatch.setenv("STOREFRONT_DELIVERY_FEE", "0")
        monkeypatch.setenv("STOREFRONT_TAX_AMOUNT", "12.5")
        reset_settings()

        _add(user_id, product_id=product_id)
        order = _order(_place(user_id, store_id))
        assert order.delivery_fee == 0
        assert order.tax_amount == 12.5


class TestPlaceOrderRejections:
    def test_empty_cart(self, user_id, store_id):
        with pytest.raises(EmptyCartError):
            _place(user_id, store_id)

    def test_blank_delivery_address(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id)
        with pytest.raises(ValidationError) as exc_info:
            _place(user_id, store_id, delivery_address="   ")
        assert "delivery_address" in exc_info.value.messages
        assert len(load_cart(user_id).lines) == 1

    def test_missing_store(self, user_id, product_id):
        _add(user_id, product_id=product_id)
        with pytest.raises(ValidationError) as exc_info:
            _place(user_id, None)
        assert "store_id" in exc_info.value.messages

    def test_unknown_store(self, user_id, product_id):
        _add(user_id, product_id=product_id)
        with pytest.raises(NotFoundError):
            _place(user_id, 404)
        assert len(load_cart(user_id).lines) == 1

    def test_withdrawn_product_blocks_checkout(self, user_id, store_id, product_id):
        _add(user_id, product_id=product_id, quantity=2)
        current_domain.process(RemoveProduct(product_id=product_id, store_id=store_id), asynchronous=False)

        with pytest.raises(ValidationError) as exc_info:
            _place(user_id, store_id)

        assert "items" in exc_info.value.messages
        assert current_domain.repository_for(Order).for_user(user_id) == []
        assert len(load_cart(user_id).lines) == 1

    def test_checkout_succeeds_once_withdrawn_line_is_removed(self, user_id, store_id, product_id, make_product):
        other_id = make_product(store_id, name="Denim Jacket", original_price=2499, final_price=1999)
        withdrawn_item = _add(user_id, product_id=product_id)
        _add(user_id, product_id=other_id)
        current_domain.process(RemoveProduct(product_id=product_id, store_id=store_id), asynchronous=False)
        current_domain.process(RemoveFromCart(user_id=user_id, item_id=withdrawn_item), asynchronous=False)

        order = _order(_place(user_id, store_id))

        assert [item.product_id for item in order.items] == [other_id]
        assert order.total_amount == 1999
