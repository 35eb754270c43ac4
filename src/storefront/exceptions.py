"""Storefront exception taxonomy.

Domain errors extend Protean's exception types so that framework-raised
errors (invalid command payloads, missing records) and storefront errors are
mapped to HTTP responses by the same handlers.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class NotFoundError(ObjectNotFoundError):
    """A catalogue, cart or order record does not exist."""

    def __init__(self, kind: str, identifier=None):
        self.kind = kind
        self.identifier = identifier
        self.message = f"{kind} not found"
        super().__init__({"_entity": [self.message]})

    def __str__(self):
        return self.message


class InvalidOfferError(ValidationError):
    """A negotiation offer is missing, non-finite, zero or negative."""

    def __init__(self, offer_price):
        self.offer_price = offer_price
        super().__init__({"offer_price": [f"Offer price must be a positive number, got {offer_price!r}"]})


class EmptyCartError(ValidationError):
    """An order was requested from a cart with no items."""

    def __init__(self):
        super().__init__({"cart": ["Cart is empty"]})


class InvalidTransitionError(ValidationError):
    """An order status change is not allowed by the delivery state machine."""

    def __init__(self, current_status: str, target_status: str):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__({"status": [f"Cannot transition from {current_status} to {target_status}"]})
