"""Category aggregate root for product categorization."""

from datetime import datetime

from protean.fields import DateTime, Integer, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Category:
    """A named grouping of products, listed in ``display_order``."""

    name: String(required=True, max_length=100, unique=True)
    display_order: Integer(default=0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, display_order=0):
        now = datetime.now()
        return cls(
            name=name,
            display_order=display_order,
            created_at=now,
            updated_at=now,
        )


@catalogue.repository(part_of=Category)
class CategoryRepository:
    def in_display_order(self) -> list[Category]:
        """All categories by ``display_order``; ties keep creation order."""
        categories = self._dao.query.all().items
        return sorted(categories, key=lambda category: (category.display_order, category.created_at))
