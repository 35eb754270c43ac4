"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.cart.view import load_cart
from storefront.catalogue.management import AddProduct, RegisterStore
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer_id():
    return 1


@pytest.fixture()
def context():
    """Mutable scenario state shared between steps."""
    return {"store_id": None, "product_id": None, "outcome": None, "order_id": None, "error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a store "{name}"'))
def a_store(context, name):
    context["store_id"] = current_domain.process(
        RegisterStore(owner_id=2, name=name, address="123 Fashion St, City", distance=0.4),
        asynchronous=False,
    )


@given(parsers.cfparse('a product "{name}" priced {final_price:d} with a floor of {floor:d}'))
def a_product(context, name, final_price, floor):
    context["product_id"] = current_domain.process(
        AddProduct(
            store_id=context["store_id"],
            name=name,
            original_price=1999,
            discount_percentage=20,
            final_price=final_price,
            min_acceptable_price=floor,
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Shared When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer places an order to "{address}"'))
def place_order(context, customer_id, address):
    try:
        context["order_id"] = current_domain.process(
            PlaceOrder(user_id=customer_id, store_id=context["store_id"], delivery_address=address),
            asynchronous=False,
        )
    except ValidationError as exc:
        context["error"] = exc


@when("the customer adds the product to the cart")
def add_product_to_cart(context, customer_id):
    current_domain.process(AddToCart(user_id=customer_id, product_id=context["product_id"]), asynchronous=False)


# ---------------------------------------------------------------------------
# Shared Then steps
# ---------------------------------------------------------------------------
@then("the cart is empty")
def cart_is_empty(customer_id):
    assert load_cart(customer_id).lines == []


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(context, status):
    assert current_domain.repository_for(Order).get(context["order_id"]).status == status
