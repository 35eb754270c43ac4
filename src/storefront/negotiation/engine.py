"""Single-round price negotiation between a buyer's offer and a product's floor.

The seller's floor is ``Product.floor_price``: the product's
``min_acceptable_price`` or, when that is not set, 80% of its ``final_price``.

An offer at or above the floor is accepted and becomes the agreed unit price,
even when it exceeds the displayed price. An offer below the floor is rejected
with the floor itself as the counter-offer; the buyer accepts the counter by
offering exactly that amount in a second call. No negotiation state is kept
between calls.
"""

import math
from dataclasses import dataclass
from numbers import Real

import structlog

from storefront.catalogue.product import Product
from storefront.catalogue.queries import get_product
from storefront.exceptions import InvalidOfferError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NegotiationOutcome:
    """Result of one offer against one product."""

    accepted: bool
    final_price: float
    counter_offer: float | None = None


def validate_offer(offer_price) -> float:
    """Return the offer as a float, or raise ``InvalidOfferError``."""
    if isinstance(offer_price, bool) or not isinstance(offer_price, Real):
        raise InvalidOfferError(offer_price)
    if not math.isfinite(offer_price) or offer_price <= 0:
        raise InvalidOfferError(offer_price)
    return float(offer_price)


def resolve_offer(product: Product, offer_price) -> NegotiationOutcome:
    """Resolve an offer against the product's floor. Pure; nothing is persisted."""
    offer = validate_offer(offer_price)
    floor = product.floor_price

    if offer >= floor:
        return NegotiationOutcome(accepted=True, final_price=offer)
    return NegotiationOutcome(accepted=False, final_price=floor, counter_offer=floor)


def negotiate(product_id: int, offer_price) -> NegotiationOutcome:
    """Look up the product and resolve the buyer's offer against it."""
    validate_offer(offer_price)
    product = get_product(product_id)
    outcome = resolve_offer(product, offer_price)

    logger.info(
        "offer_resolved",
        product_id=product_id,
        offer_price=offer_price,
        accepted=outcome.accepted,
        final_price=outcome.final_price,
    )
    return outcome
