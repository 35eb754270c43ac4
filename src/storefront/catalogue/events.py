"""Domain events for the catalogue aggregates."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new browsing category was added to the storefront."""

    __version__ = 1

    category_id = Integer(required=True)
    name = String(required=True)
    icon = String(required=True)


@storefront.event(part_of="Store")
class StoreRegistered:
    """A retailer opened a store on the storefront."""

    __version__ = 1

    store_id = Integer(required=True)
    owner_id = Integer(required=True)
    name = String(required=True)
    address = String(required=True)


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was listed by a store."""

    __version__ = 1

    product_id = Integer(required=True)
    store_id = Integer(required=True)
    category_id = Integer()
    name = String(required=True)
    original_price = Float(required=True)
    final_price = Float(required=True)
    min_acceptable_price = Float()


@storefront.event(part_of="Service")
class ServiceAdded:
    """A bookable beauty or tailoring service was listed by a store."""

    __version__ = 1

    service_id = Integer(required=True)
    store_id = Integer(required=True)
    name = String(required=True)
    service_type = String(required=True)
    price = Float(required=True)
