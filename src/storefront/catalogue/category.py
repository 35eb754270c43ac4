"""Category aggregate: top-level browsing groups shown on the home screen."""

from protean.fields import Integer, String

from storefront.catalogue.events import CategoryCreated
from storefront.domain import storefront
from storefront.utils.sequence import next_id


@storefront.aggregate
class Category:
    """A named browsing group with an icon reference. Immutable once created."""

    id = Integer(identifier=True)
    name = String(required=True, max_length=100)
    icon = String(required=True, max_length=100)

    @classmethod
    def create(cls, name, icon):
        category = cls(id=next_id("category", cls), name=name, icon=icon)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                icon=icon,
            )
        )
        return category


@storefront.repository(part_of=Category)
class CategoryRepository:
    def list_all(self) -> list[Category]:
        """All categories in creation order."""
        return sorted(self._dao.query.all().items, key=lambda c: c.id)
