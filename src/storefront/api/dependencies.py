"""Request-scoped identity for the storefront API.

There is no authentication: the customer and the retailer's store are taken
from request headers and fall back to the configured defaults.
"""

from fastapi import Header

from storefront.config import get_settings


def current_user_id(x_user_id: int | None = Header(default=None)) -> int:
    if x_user_id is None:
        return get_settings().default_user_id
    return x_user_id


def retailer_store_id(x_store_id: int | None = Header(default=None)) -> int:
    if x_store_id is None:
        return get_settings().default_store_id
    return x_store_id
