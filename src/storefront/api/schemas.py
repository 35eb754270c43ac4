"""Pydantic request/response schemas for the storefront API.

These are external contracts, separate from the internal Protean commands.
JSON keys are camelCase; requests may also use the snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class CategoryResponse(CamelModel):
    id: int
    name: str
    icon: str


class StoreResponse(CamelModel):
    id: int
    owner_id: int
    name: str
    description: str | None = None
    address: str
    rating: float | None = None
    review_count: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance: float | None = None
    delivery_time: int | None = None
    image_url: str | None = None


class ProductResponse(CamelModel):
    """Customer-facing product. The negotiation floor is never exposed."""

    id: int
    store_id: int
    category_id: int | None = None
    name: str
    description: str | None = None
    original_price: float
    discount_percentage: int | None = None
    final_price: float
    stock: int | None = None
    rating: float | None = None
    review_count: int | None = None
    image_url: str | None = None


class ProductWithStoreResponse(ProductResponse):
    store: StoreResponse

    @classmethod
    def build(cls, product, store):
        return cls(
            **ProductResponse.model_validate(product).model_dump(),
            store=StoreResponse.model_validate(store),
        )


class RetailerProductResponse(ProductResponse):
    min_acceptable_price: float | None = None


class ServiceResponse(CamelModel):
    id: int
    store_id: int
    name: str
    description: str | None = None
    service_type: str
    price: float
    duration: int | None = None
    rating: float | None = None
    review_count: int | None = None
    image_url: str | None = None


class ServiceWithStoreResponse(ServiceResponse):
    store: StoreResponse

    @classmethod
    def build(cls, service, store):
        return cls(
            **ServiceResponse.model_validate(service).model_dump(),
            store=StoreResponse.model_validate(store),
        )


class CreateProductRequest(CamelModel):
    category_id: int | None = None
    name: str
    description: str | None = None
    original_price: float = Field(ge=0)
    discount_percentage: int = Field(default=0, ge=0, le=100)
    final_price: float | None = Field(default=None, ge=0)
    min_acceptable_price: float | None = Field(default=None, ge=0)
    stock: int = Field(default=0, ge=0)
    image_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "categoryId": 1,
                    "name": "Summer Floral Dress",
                    "originalPrice": 1999,
                    "discountPercentage": 20,
                    "minAcceptablePrice": 1299,
                    "stock": 15,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Negotiation
# ---------------------------------------------------------------------------
class NegotiateRequest(CamelModel):
    # Numbers only; "1299" and true are request errors, not offers
    offer_price: StrictInt | StrictFloat | None = None


class NegotiateResponse(CamelModel):
    accepted: bool
    counter_offer: float | None = None
    final_price: float


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    product_id: int | None = None
    service_id: int | None = None
    quantity: int = 1
    negotiated_price: float | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": 1,
                    "quantity": 1,
                    "negotiatedPrice": 1299,
                }
            ]
        }
    }


class UpdateCartItemRequest(CamelModel):
    quantity: int


class CartItemResponse(CamelModel):
    id: int
    line_type: str
    product_id: int | None = None
    service_id: int | None = None
    quantity: int
    negotiated_price: float | None = None
    added_at: datetime | None = None


class CartLineResponse(CartItemResponse):
    product: ProductWithStoreResponse | None = None
    service: ServiceWithStoreResponse | None = None
    unit_price: float
    line_total: float

    @classmethod
    def build(cls, line):
        product = service = None
        if line.product is not None and line.store is not None:
            product = ProductWithStoreResponse.build(line.product, line.store)
        if line.service is not None and line.store is not None:
            service = ServiceWithStoreResponse.build(line.service, line.store)
        return cls(
            **CartItemResponse.model_validate(line.item).model_dump(),
            product=product,
            service=service,
            unit_price=line.unit_price,
            line_total=line.line_total,
        )


class CartResponse(CamelModel):
    id: int
    user_id: int
    items: list[CartLineResponse]
    total_amount: float
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def build(cls, snapshot):
        cart = snapshot.cart
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            items=[CartLineResponse.build(line) for line in snapshot.lines],
            total_amount=snapshot.total_amount,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CreateOrderRequest(CamelModel):
    store_id: int | None = None
    payment_method: str | None = None
    delivery_address: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "storeId": 1,
                    "paymentMethod": "cod",
                    "deliveryAddress": "123 Main St, City",
                }
            ]
        }
    }


class UpdateOrderStatusRequest(CamelModel):
    status: str


class OrderItemResponse(CamelModel):
    id: int
    line_type: str
    product_id: int | None = None
    service_id: int | None = None
    quantity: int
    price: float
    negotiated_price: float
    total_price: float


class OrderResponse(CamelModel):
    id: int
    user_id: int
    store_id: int
    status: str
    total_amount: float
    delivery_fee: float
    tax_amount: float
    discount_amount: float
    payment_method: str
    delivery_address: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    estimated_delivery_time: datetime | None = None
    items: list[OrderItemResponse] = []

    @classmethod
    def _fields(cls, order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "store_id": order.store_id,
            "status": order.status,
            "total_amount": order.total_amount,
            "delivery_fee": order.delivery_fee,
            "tax_amount": order.tax_amount,
            "discount_amount": order.discount_amount,
            "payment_method": order.payment_method,
            "delivery_address": order.delivery_address,
            "created_at": order.created_at,
            "updated_at": order.updated_at,
            "estimated_delivery_time": order.estimated_delivery_time,
        }

    @classmethod
    def build(cls, order):
        items = sorted(order.items, key=lambda i: i.id)
        return cls(
            **cls._fields(order),
            items=[OrderItemResponse.model_validate(item) for item in items],
        )


class OrderLineResponse(OrderItemResponse):
    product: ProductResponse | None = None
    service: ServiceResponse | None = None


class OrderDetailsResponse(OrderResponse):
    items: list[OrderLineResponse] = []
    store: StoreResponse

    @classmethod
    def build(cls, details):
        lines = [
            OrderLineResponse(
                **OrderItemResponse.model_validate(line.item).model_dump(),
                product=ProductResponse.model_validate(line.product) if line.product else None,
                service=ServiceResponse.model_validate(line.service) if line.service else None,
            )
            for line in details.lines
        ]
        return cls(
            **cls._fields(details.order),
            items=lines,
            store=StoreResponse.model_validate(details.store),
        )


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class SuccessResponse(CamelModel):
    success: bool = True


class HealthResponse(CamelModel):
    status: str = "ok"
