"""FastAPI routes for the storefront: catalogue, negotiation, cart, orders
and the retailer dashboard.

Routers carry paths relative to the ``/api`` prefix applied by the app.
"""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user_id, retailer_store_id
from storefront.api.schemas import (
    AddToCartRequest,
    CartItemResponse,
    CartResponse,
    CategoryResponse,
    CreateOrderRequest,
    CreateProductRequest,
    HealthResponse,
    NegotiateRequest,
    NegotiateResponse,
    OrderDetailsResponse,
    OrderResponse,
    ProductResponse,
    ProductWithStoreResponse,
    RetailerProductResponse,
    ServiceResponse,
    StoreResponse,
    SuccessResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.cart.view import get_cart_item, load_cart
from storefront.catalogue import queries as catalogue
from storefront.catalogue.management import AddProduct, RemoveProduct
from storefront.negotiation.engine import negotiate
from storefront.order import queries as orders
from storefront.order.placement import PlaceOrder
from storefront.order.status import UpdateOrderStatus

health_router = APIRouter(tags=["health"])
catalogue_router = APIRouter(tags=["catalogue"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
retailer_router = APIRouter(prefix="/retailer", tags=["retailer"])


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
@catalogue_router.get("/categories", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in catalogue.list_categories()]


@catalogue_router.get("/stores", response_model=list[StoreResponse])
async def list_stores() -> list[StoreResponse]:
    return [StoreResponse.model_validate(s) for s in catalogue.list_stores()]


@catalogue_router.get("/stores/nearby", response_model=list[StoreResponse])
async def nearby_stores() -> list[StoreResponse]:
    return [StoreResponse.model_validate(s) for s in catalogue.nearby_stores()]


@catalogue_router.get("/stores/{store_id}", response_model=StoreResponse)
async def get_store(store_id: int) -> StoreResponse:
    return StoreResponse.model_validate(catalogue.get_store(store_id))


@catalogue_router.get("/products", response_model=list[ProductResponse])
async def list_products(
    category_id: int | None = Query(default=None, alias="categoryId"),
    store_id: int | None = Query(default=None, alias="storeId"),
) -> list[ProductResponse]:
    products = catalogue.filter_products(category_id=category_id, store_id=store_id)
    return [ProductResponse.model_validate(p) for p in products]


@catalogue_router.get("/products/hot-deals", response_model=list[ProductResponse])
async def hot_deals() -> list[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in catalogue.hot_deals()]


@catalogue_router.get("/products/{product_id}", response_model=ProductWithStoreResponse)
async def get_product(product_id: int) -> ProductWithStoreResponse:
    product, store = catalogue.get_product_with_store(product_id)
    return ProductWithStoreResponse.build(product, store)


@catalogue_router.post(
    "/products/{product_id}/negotiate",
    response_model=NegotiateResponse,
    response_model_exclude_none=True,
)
async def negotiate_price(product_id: int, body: NegotiateRequest) -> NegotiateResponse:
    outcome = negotiate(product_id, body.offer_price)
    return NegotiateResponse(
        accepted=outcome.accepted,
        counter_offer=outcome.counter_offer,
        final_price=outcome.final_price,
    )


@catalogue_router.get("/services", response_model=list[ServiceResponse])
async def list_services(service_type: str | None = Query(default=None, alias="type")) -> list[ServiceResponse]:
    return [ServiceResponse.model_validate(s) for s in catalogue.list_services(service_type)]


@catalogue_router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: int) -> ServiceResponse:
    return ServiceResponse.model_validate(catalogue.get_service(service_id))


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.get("", response_model=CartResponse)
async def get_cart(user_id: int = Depends(current_user_id)) -> CartResponse:
    return CartResponse.build(load_cart(user_id))


@cart_router.post("/items", response_model=CartItemResponse)
async def add_cart_item(body: AddToCartRequest, user_id: int = Depends(current_user_id)) -> CartItemResponse:
    command = AddToCart(
        user_id=user_id,
        product_id=body.product_id,
        service_id=body.service_id,
        quantity=body.quantity,
        negotiated_price=body.negotiated_price,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return CartItemResponse.model_validate(get_cart_item(user_id, item_id))


@cart_router.put("/items/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: int,
    body: UpdateCartItemRequest,
    user_id: int = Depends(current_user_id),
) -> CartItemResponse:
    command = UpdateCartItemQuantity(
        user_id=user_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartItemResponse.model_validate(get_cart_item(user_id, item_id))


@cart_router.delete("/items/{item_id}", response_model=SuccessResponse)
async def remove_cart_item(item_id: int, user_id: int = Depends(current_user_id)) -> SuccessResponse:
    command = RemoveFromCart(user_id=user_id, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.get("", response_model=list[OrderResponse])
async def list_orders(user_id: int = Depends(current_user_id)) -> list[OrderResponse]:
    return [OrderResponse.build(o) for o in orders.user_orders(user_id)]


@order_router.get("/{order_id}", response_model=OrderDetailsResponse)
async def get_order(order_id: int) -> OrderDetailsResponse:
    return OrderDetailsResponse.build(orders.get_order_details(order_id))


@order_router.post("", response_model=OrderResponse)
async def create_order(body: CreateOrderRequest, user_id: int = Depends(current_user_id)) -> OrderResponse:
    command = PlaceOrder(
        user_id=user_id,
        store_id=body.store_id,
        payment_method=body.payment_method,
        delivery_address=body.delivery_address,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.build(orders.get_order(order_id))


# ---------------------------------------------------------------------------
# Retailer dashboard
# ---------------------------------------------------------------------------
@retailer_router.get("/products", response_model=list[RetailerProductResponse])
async def list_store_products(store_id: int = Depends(retailer_store_id)) -> list[RetailerProductResponse]:
    return [RetailerProductResponse.model_validate(p) for p in catalogue.store_products(store_id)]


@retailer_router.post("/products", status_code=201, response_model=RetailerProductResponse)
async def add_store_product(
    body: CreateProductRequest,
    store_id: int = Depends(retailer_store_id),
) -> RetailerProductResponse:
    command = AddProduct(
        store_id=store_id,
        category_id=body.category_id,
        name=body.name,
        description=body.description,
        original_price=body.original_price,
        discount_percentage=body.discount_percentage,
        final_price=body.final_price,
        min_acceptable_price=body.min_acceptable_price,
        stock=body.stock,
        image_url=body.image_url,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return RetailerProductResponse.model_validate(catalogue.get_product(product_id))


@retailer_router.delete("/products/{product_id}", response_model=SuccessResponse)
async def remove_store_product(product_id: int, store_id: int = Depends(retailer_store_id)) -> SuccessResponse:
    command = RemoveProduct(product_id=product_id, store_id=store_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@retailer_router.get("/orders", response_model=list[OrderResponse])
async def list_store_orders(store_id: int = Depends(retailer_store_id)) -> list[OrderResponse]:
    return [OrderResponse.build(o) for o in orders.store_orders(store_id)]


@retailer_router.put("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    body: UpdateOrderStatusRequest,
    store_id: int = Depends(retailer_store_id),
) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status, store_id=store_id)
    current_domain.process(command, asynchronous=False)
    return OrderResponse.build(orders.get_order(order_id))
