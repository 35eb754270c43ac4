"""Application tests for negotiating against a persisted product."""

import pytest
from storefront.exceptions import InvalidOfferError, NotFoundError
from storefront.negotiation.engine import negotiate


class TestNegotiate:
    def test_offer_below_floor_gets_counter_offer(self, product_id):
        outcome = negotiate(product_id, 1200)
        assert outcome.accepted is False
        assert outcome.counter_offer == 1299
        assert outcome.final_price == 1299

    def test_offer_at_floor_is_accepted(self, product_id):
        outcome = negotiate(product_id, 1299)
        assert outcome.accepted is True
        assert outcome.final_price == 1299

    def test_counter_offer_accepted_on_second_round(self, product_id):
        first = negotiate(product_id, 900)
        second = negotiate(product_id, first.counter_offer)
        assert second.accepted is True

    def test_unknown_product(self):
        with pytest.raises(NotFoundError):
            negotiate(404, 1000)

    @pytest.mark.parametrize("offer", [0, -100])
    def test_invalid_offer(self, product_id, offer):
        with pytest.raises(InvalidOfferError):
            negotiate(product_id, offer)

    def test_invalid_offer_checked_before_lookup(self):
        with pytest.raises(InvalidOfferError):
            negotiate(404, 0)
