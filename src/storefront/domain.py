"""Storefront bounded context: catalogue, negotiation, cart and orders.

A single domain serves the customer storefront and the retailer dashboard.
Catalogue aggregates are read-mostly; carts and orders change through
commands processed synchronously inside a unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
