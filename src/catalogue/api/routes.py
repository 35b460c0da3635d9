"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter

from catalogue.api.schemas import ProductListingResponse
from catalogue.product.listing import list_products

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListingResponse)
async def get_products(category_id: str | None = None) -> ProductListingResponse:
    return ProductListingResponse(**list_products(category_id=category_id))
