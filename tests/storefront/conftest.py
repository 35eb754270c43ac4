"""Catalogue builders shared by the storefront tests.

Records are created through the regular commands, so every test starts from
data that passed the same validation as production data.
"""

import pytest
from protean import current_domain
from storefront.catalogue.management import AddProduct, AddService, CreateCategory, RegisterStore


@pytest.fixture()
def make_category():
    def _make(**overrides):
        defaults = {"name": "Clothing", "icon": "fa-tshirt"}
        defaults.update(overrides)
        return current_domain.process(CreateCategory(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_store():
    def _make(**overrides):
        defaults = {
            "owner_id": 2,
            "name": "Trendy Fashion Hub",
            "address": "123 Fashion St, City",
            "distance": 0.4,
        }
        defaults.update(overrides)
        return current_domain.process(RegisterStore(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_product():
    def _make(store_id, **overrides):
        defaults = {
            "store_id": store_id,
            "name": "Summer Floral Dress",
            "original_price": 1999,
            "discount_percentage": 20,
            "final_price": 1599,
            "min_acceptable_price": 1299,
            "stock": 15,
        }
        defaults.update(overrides)
        return current_domain.process(AddProduct(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_service():
    def _make(store_id, **overrides):
        defaults = {
            "store_id": store_id,
            "name": "Fashion Tailors",
            "service_type": "tailoring",
            "price": 299,
            "duration": 45,
        }
        defaults.update(overrides)
        return current_domain.process(AddService(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def store_id(make_store):
    return make_store()


@pytest.fixture()
def product_id(make_product, store_id):
    return make_product(store_id)


@pytest.fixture()
def service_id(make_service, store_id):
    return make_service(store_id)


@pytest.fixture()
def user_id():
    return 1
