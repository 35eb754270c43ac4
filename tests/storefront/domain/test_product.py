"""Tests for the Product aggregate's pricing."""

from storefront.catalogue.events import ProductAdded
from storefront.catalogue.product import Product


def _product(**overrides):
    defaults = {
        "store_id": 1,
        "name": "Summer Floral Dress",
        "original_price": 1999,
        "discount_percentage": 20,
        "final_price": 1599,
        "min_acceptable_price": 1299,
    }
    defaults.update(overrides)
    return Product.add(**defaults)


class TestFinalPrice:
    def test_explicit_final_price_is_kept(self):
        product = _product()
        assert product.final_price == 1599

    def test_final_price_derived_from_discount(self):
        product = _product(final_price=None, original_price=2000, discount_percentage=15)
        assert product.final_price == 1700

    def test_derived_final_price_rounds_to_whole_units(self):
        product = _product(final_price=None, original_price=1999, discount_percentage=25)
        assert product.final_price == 1499

    def test_no_discount_means_list_price(self):
        product = _product(final_price=None, discount_percentage=0)
        assert product.final_price == 1999


class TestFloorPrice:
    def test_floor_is_min_acceptable_price(self):
        assert _product().floor_price == 1299

    def test_floor_defaults_to_eighty_percent_of_final_price(self):
        product = _product(final_price=1000, min_acceptable_price=None)
        assert product.floor_price == 800


class TestProductAddedEvent:
    def test_add_raises_event(self):
        product = _product()
        events = [e for e in product._events if isinstance(e, ProductAdded)]
        assert len(events) == 1
        assert events[0].product_id == product.id
        assert events[0].final_price == 1599

    def test_ids_increase_in_creation_order(self):
        first = _product()
        second = _product(name="Premium Denim Jacket")
        assert second.id > first.id
