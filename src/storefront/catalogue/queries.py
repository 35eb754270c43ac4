"""Catalogue read side: lookups and listings used by the storefront API.

Reads go straight to the aggregate repositories. Unknown identifiers raise
``NotFoundError`` rather than returning ``None``.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.catalogue.service import Service
from storefront.catalogue.store import Store
from storefront.exceptions import NotFoundError


def _get(aggregate_cls, identifier):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        raise NotFoundError(aggregate_cls.__name__, identifier)


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category).list_all()


def list_stores() -> list[Store]:
    return current_domain.repository_for(Store).list_all()


def nearby_stores() -> list[Store]:
    return current_domain.repository_for(Store).nearby()


def get_store(store_id: int) -> Store:
    return _get(Store, store_id)


def get_product(product_id: int) -> Product:
    return _get(Product, product_id)


def get_product_with_store(product_id: int) -> tuple[Product, Store]:
    """A product together with the store that sells it."""
    product = get_product(product_id)
    return product, get_store(product.store_id)


def filter_products(category_id: int | None = None, store_id: int | None = None) -> list[Product]:
    return current_domain.repository_for(Product).filter_by(category_id=category_id, store_id=store_id)


def hot_deals() -> list[Product]:
    return current_domain.repository_for(Product).hot_deals()


def store_products(store_id: int) -> list[Product]:
    return current_domain.repository_for(Product).for_store(store_id)


def list_services(service_type: str | None = None) -> list[Service]:
    return current_domain.repository_for(Service).list_all(service_type)


def get_service(service_id: int) -> Service:
    return _get(Service, service_id)


def get_service_with_store(service_id: int) -> tuple[Service, Store]:
    service = get_service(service_id)
    return service, get_store(service.store_id)
