"""Pydantic response schemas for the Catalogue API."""

from pydantic import BaseModel


class ProductRow(BaseModel):
    id: str
    name: str
    category_id: str | None = None
    price: int
    is_campaign: bool
    campaign_discount_percent: int
    discounted_price: int
    is_active: bool


class CategoryRow(BaseModel):
    id: str
    name: str
    display_order: int


class ProductListingResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "products": [
                        {
                            "id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                            "name": "Green Tea",
                            "category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                            "price": 300,
                            "is_campaign": True,
                            "campaign_discount_percent": 10,
                            "discounted_price": 270,
                            "is_active": True,
                        }
                    ],
                    "categories": [
                        {"id": "c3d4e5f6-a7b8-9012-cdef-123456789012", "name": "Drinks", "display_order": 1}
                    ],
                }
            ]
        }
    }

    products: list[ProductRow]
    categories: list[CategoryRow]
