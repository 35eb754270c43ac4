"""Product aggregate: a store's listed item with list, discounted and floor prices.

Three prices matter for a product:

- ``original_price``: the list price before any discount.
- ``final_price``: the displayed price after ``discount_percentage``.
- ``min_acceptable_price``: the lowest unit price the seller accepts when
  negotiating. When absent, the floor is 80% of ``final_price``.

The ordering ``0 <= min_acceptable_price <= final_price <= original_price`` is
expected of catalogue data but is not enforced.
"""

from protean.fields import Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded
from storefront.domain import storefront
from storefront.utils.sequence import next_id

DEFAULT_FLOOR_RATIO = 0.8
HOT_DEALS_LIMIT = 4


@storefront.aggregate
class Product:
    id = Integer(identifier=True)
    store_id = Integer(required=True)
    category_id = Integer()
    name = String(required=True, max_length=255)
    description = Text()
    original_price = Float(required=True, min_value=0.0)
    discount_percentage = Integer(default=0, min_value=0, max_value=100)
    final_price = Float(required=True, min_value=0.0)
    min_acceptable_price = Float(min_value=0.0)
    stock = Integer(default=0, min_value=0)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    image_url = String(max_length=1000)

    @classmethod
    def add(
        cls,
        store_id,
        name,
        original_price,
        discount_percentage=0,
        final_price=None,
        min_acceptable_price=None,
        category_id=None,
        description=None,
        stock=0,
        rating=0.0,
        review_count=0,
        image_url=None,
    ):
        """List a new product.

        When ``final_price`` is not given it is derived from the list price and
        discount, rounded to whole currency units.
        """
        if final_price is None:
            final_price = float(round(original_price * (100 - (discount_percentage or 0)) / 100))

        product = cls(
            id=next_id("product", cls),
            store_id=store_id,
            category_id=category_id,
            name=name,
            description=description,
            original_price=original_price,
            discount_percentage=discount_percentage or 0,
            final_price=final_price,
            min_acceptable_price=min_acceptable_price,
            stock=stock,
            rating=rating,
            review_count=review_count,
            image_url=image_url,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                store_id=store_id,
                category_id=category_id,
                name=name,
                original_price=product.original_price,
                final_price=product.final_price,
                min_acceptable_price=min_acceptable_price,
            )
        )
        return product

    @property
    def floor_price(self) -> float:
        """Lowest unit price the seller accepts in negotiation."""
        if self.min_acceptable_price is not None:
            return self.min_acceptable_price
        return self.final_price * DEFAULT_FLOOR_RATIO


@storefront.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        return sorted(self._dao.query.all().items, key=lambda p: p.id)

    def filter_by(self, category_id: int | None = None, store_id: int | None = None) -> list[Product]:
        """Exact-match filter; both criteria must hold when both are given."""
        criteria = {}
        if category_id is not None:
            criteria["category_id"] = category_id
        if store_id is not None:
            criteria["store_id"] = store_id
        if not criteria:
            return self.list_all()
        return sorted(self._dao.query.filter(**criteria).all().items, key=lambda p: p.id)

    def for_store(self, store_id: int) -> list[Product]:
        return self.filter_by(store_id=store_id)

    def hot_deals(self, limit: int = HOT_DEALS_LIMIT) -> list[Product]:
        """Deepest discounts first; ties keep creation order."""
        return sorted(self.list_all(), key=lambda p: -(p.discount_percentage or 0))[:limit]
