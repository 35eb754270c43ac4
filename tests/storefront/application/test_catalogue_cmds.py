"""Application tests for catalogue management commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.management import AddProduct, AddService, RemoveProduct
from storefront.catalogue.product import Product
from storefront.catalogue.service import Service
from storefront.catalogue.store import Store
from storefront.exceptions import NotFoundError


class TestRegisterStore:
    def test_store_persists(self, make_store):
        store_id = make_store(name="Fashion Boutique", delivery_time=30)
        store = current_domain.repository_for(Store).get(store_id)
        assert store.name == "Fashion Boutique"
        assert store.owner_id == 2
        assert store.delivery_time == 30


class TestAddProduct:
    def test_product_persists(self, make_product, store_id):
        product_id = make_product(store_id)
        product = current_domain.repository_for(Product).get(product_id)
        assert product.store_id == store_id
        assert product.final_price == 1599
        assert product.min_acceptable_price == 1299

    def test_final_price_derived_when_omitted(self, store_id):
        product_id = current_domain.process(
            AddProduct(store_id=store_id, name="Canvas Sneakers", original_price=1299, discount_percentage=25),
            asynchronous=False,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.final_price == 974

    def test_unknown_store_is_rejected(self):
        with pytest.raises(NotFoundError):
            current_domain.process(
                AddProduct(store_id=99, name="Orphan", original_price=100),
                asynchronous=False,
            )

    def test_discount_above_hundred_is_invalid(self, store_id):
        with pytest.raises(ValidationError):
            AddProduct(store_id=store_id, name="Too Cheap", original_price=100, discount_percentage=120)


class TestRemoveProduct:
    def test_product_is_removed(self, product_id, store_id):
        current_domain.process(RemoveProduct(product_id=product_id, store_id=store_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)

    def test_other_stores_products_cannot_be_removed(self, product_id, make_store):
        other_store = make_store(name="Style Avenue")
        with pytest.raises(NotFoundError):
            current_domain.process(RemoveProduct(product_id=product_id, store_id=other_store), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).id == product_id

    def test_unknown_product(self, store_id):
        with pytest.raises(NotFoundError):
            current_domain.process(RemoveProduct(product_id=404, store_id=store_id), asynchronous=False)


class TestAddService:
    def test_service_persists(self, make_service, store_id):
        service_id = make_service(store_id)
        service = current_domain.repository_for(Service).get(service_id)
        assert service.service_type == "tailoring"
        assert service.price == 299

    def test_unknown_service_type_is_invalid(self, store_id):
        with pytest.raises(ValidationError):
            AddService(store_id=store_id, name="Spa", service_type="massage", price=999)
