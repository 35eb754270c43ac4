"""Store aggregate: a retailer's shop front, with location and delivery estimate."""

from protean.fields import Float, Integer, String, Text

from storefront.catalogue.events import StoreRegistered
from storefront.domain import storefront
from storefront.utils.sequence import next_id

NEARBY_STORE_LIMIT = 5


@storefront.aggregate
class Store:
    """A physical shop owned by a retailer user.

    ``distance`` is the precomputed distance (km) from the customer's area and
    drives the "nearby" listing. ``delivery_time`` is the estimate in minutes.
    """

    id = Integer(identifier=True)
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

    @classmethod
    def register(
        cls,
        owner_id,
        name,
        address,
        description=None,
        rating=0.0,
        review_count=0,
        latitude=None,
        longitude=None,
        distance=None,
        delivery_time=30,
        image_url=None,
    ):
        store = cls(
            id=next_id("store", cls),
            owner_id=owner_id,
            name=name,
            description=description,
            address=address,
            rating=rating,
            review_count=review_count,
            latitude=latitude,
            longitude=longitude,
            distance=distance,
            delivery_time=delivery_time,
            image_url=image_url,
        )
        store.raise_(
            StoreRegistered(
                store_id=store.id,
                owner_id=owner_id,
                name=name,
                address=address,
            )
        )
        return store


@storefront.repository(part_of=Store)
class StoreRepository:
    def list_all(self) -> list[Store]:
        return sorted(self._dao.query.all().items, key=lambda s: s.id)

    def nearby(self, limit: int = NEARBY_STORE_LIMIT) -> list[Store]:
        """Closest stores first. Stores without a distance sort as 0; ties keep creation order."""
        return sorted(self.list_all(), key=lambda s: s.distance or 0)[:limit]
