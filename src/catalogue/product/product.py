"""Product aggregate root — the sellable items of the catalogue.

Prices are whole currency units. A product on campaign is sold at its list
price reduced by ``campaign_discount_percent``.
"""

from datetime import datetime

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Product:
    name: String(required=True, max_length=255)
    category_id: Identifier()
    price: Integer(required=True, min_value=0)
    is_campaign: Boolean(default=False)
    campaign_discount_percent: Integer(default=0, min_value=0, max_value=100)
    is_active: Boolean(default=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, price, category_id=None, campaign_discount_percent=0, is_active=True):
        now = datetime.now()
        return cls(
            name=name,
            category_id=category_id,
            price=price,
            is_campaign=campaign_discount_percent > 0,
            campaign_discount_percent=campaign_discount_percent,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )


@catalogue.repository(part_of=Product)
class ProductRepository:
    def active_products(self) -> list[Product]:
        return self._dao.query.filter(is_active=True).all().items

    def in_category(self, category_id) -> list[Product]:
        """Every product of the category, including inactive ones."""
        return self._dao.query.filter(category_id=category_id).all().items
