"""Service aggregate: bookable beauty and tailoring services offered by stores.

Services have a flat price and are never negotiated.
"""

from enum import Enum

from protean.fields import Float, Integer, String, Text

from storefront.catalogue.events import ServiceAdded
from storefront.domain import storefront
from storefront.utils.sequence import next_id


class ServiceType(Enum):
    BEAUTY = "beauty"
    TAILORING = "tailoring"


@storefront.aggregate
class Service:
    id = Integer(identifier=True)
    store_id = Integer(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    service_type = String(required=True, choices=ServiceType)
    price = Float(required=True, min_value=0.0)
    duration = Integer(default=30, min_value=1)  # minutes
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    image_url = String(max_length=1000)

    @classmethod
    def add(
        cls,
        store_id,
        name,
        service_type,
        price,
        description=None,
        duration=30,
        rating=0.0,
        review_count=0,
        image_url=None,
    ):
        service = cls(
            id=next_id("service", cls),
            store_id=store_id,
            name=name,
            description=description,
            service_type=service_type,
            price=price,
            duration=duration,
            rating=rating,
            review_count=review_count,
            image_url=image_url,
        )
        service.raise_(
            ServiceAdded(
                service_id=service.id,
                store_id=store_id,
                name=name,
                service_type=service_type,
                price=price,
            )
        )
        return service


@storefront.repository(part_of=Service)
class ServiceRepository:
    def list_all(self, service_type: str | None = None) -> list[Service]:
        """All services, optionally restricted to one type (exact match)."""
        if service_type:
            items = self._dao.query.filter(service_type=service_type).all().items
        else:
            items = self._dao.query.all().items
        return sorted(items, key=lambda s: s.id)
