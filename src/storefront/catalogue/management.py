"""Catalogue management: commands and handlers for listing categories, stores,
products and services, and for withdrawing products.

These are retailer and back-office operations; the customer storefront only
reads the catalogue.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.catalogue.service import Service, ServiceType
from storefront.catalogue.store import Store
from storefront.domain import storefront
from storefront.exceptions import NotFoundError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    icon = String(required=True, max_length=100)


@storefront.command(part_of="Store")
class RegisterStore:
    owner_id = Integer(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    address = String(required=True, max_length=500)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    latitude = Float()
    longitude = Float()
    distance = Float()
    delivery_time = Integer(default=30)
    image_url = String(max_length=1000)


@storefront.command(part_of="Product")
class AddProduct:
    store_id = Integer(required=True)
    category_id = Integer()
    name = String(required=True, max_length=255)
    description = Text()
    original_price = Float(required=True, min_value=0.0)
    discount_percentage = Integer(default=0, min_value=0, max_value=100)
    final_price = Float(min_value=0.0)  # Derived from the discount when omitted
    min_acceptable_price = Float(min_value=0.0)
    stock = Integer(default=0, min_value=0)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    image_url = String(max_length=1000)


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Integer(required=True)
    store_id = Integer(required=True)


@storefront.command(part_of="Service")
class AddService:
    store_id = Integer(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    service_type = String(required=True, choices=ServiceType)
    price = Float(required=True, min_value=0.0)
    duration = Integer(default=30, min_value=1)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    image_url = String(max_length=1000)


def _ensure_store(store_id):
    try:
        return current_domain.repository_for(Store).get(store_id)
    except ObjectNotFoundError:
        raise NotFoundError("Store", store_id)


@storefront.command_handler(part_of=Category)
class ManageCategoriesHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, icon=command.icon)
        current_domain.repository_for(Category).add(category)
        return category.id


@storefront.command_handler(part_of=Store)
class ManageStoresHandler:
    @handle(RegisterStore)
    def register_store(self, command):
        store = Store.register(
            owner_id=command.owner_id,
            name=command.name,
            description=command.description,
            address=command.address,
            rating=command.rating,
            review_count=command.review_count,
            latitude=command.latitude,
            longitude=command.longitude,
            distance=command.distance,
            delivery_time=command.delivery_time,
            image_url=command.image_url,
        )
        current_domain.repository_for(Store).add(store)
        logger.info("store_registered", store_id=store.id, owner_id=store.owner_id)
        return store.id


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        _ensure_store(command.store_id)

        product = Product.add(
            store_id=command.store_id,
            category_id=command.category_id,
            name=command.name,
            description=command.description,
            original_price=command.original_price,
            discount_percentage=command.discount_percentage,
            final_price=command.final_price,
            min_acceptable_price=command.min_acceptable_price,
            stock=command.stock,
            rating=command.rating,
            review_count=command.review_count,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=product.id, store_id=product.store_id)
        return product.id

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise NotFoundError("Product", command.product_id)

        # A store may only withdraw its own listings
        if product.store_id != command.store_id:
            raise NotFoundError("Product", command.product_id)

        repo._dao.delete(product)
        logger.info("product_removed", product_id=command.product_id, store_id=command.store_id)


@storefront.command_handler(part_of=Service)
class ManageServicesHandler:
    @handle(AddService)
    def add_service(self, command):
        _ensure_store(command.store_id)

        service = Service.add(
            store_id=command.store_id,
            name=command.name,
            description=command.description,
            service_type=command.service_type,
            price=command.price,
            duration=command.duration,
            rating=command.rating,
            review_count=command.review_count,
            image_url=command.image_url,
        )
        current_domain.repository_for(Service).add(service)
        return service.id
