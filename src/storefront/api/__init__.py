"""Storefront API package."""

from storefront.api.routes import (
    cart_router,
    catalogue_router,
    health_router,
    order_router,
    retailer_router,
)

routers = [health_router, catalogue_router, cart_router, order_router, retailer_router]

__all__ = ["routers"]
