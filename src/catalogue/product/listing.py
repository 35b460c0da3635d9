"""Product listing for the storefront.

``list_products`` returns the products to show together with every category.
Filtering by category returns inactive products as well; the unfiltered
listing only returns active ones.
"""

import structlog
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


def discounted_price(price: int, campaign_discount_percent: int) -> int:
    """List price reduced by the campaign discount, truncated to whole units."""
    if not campaign_discount_percent:
        return price
    return price * (100 - campaign_discount_percent) // 100


def _product_row(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "category_id": str(product.category_id) if product.category_id else None,
        "price": product.price,
        "is_campaign": product.is_campaign,
        "campaign_discount_percent": product.campaign_discount_percent,
        "discounted_price": discounted_price(product.price, product.campaign_discount_percent),
        "is_active": product.is_active,
    }


def _category_row(category: Category) -> dict:
    return {
        "id": str(category.id),
        "name": category.name,
        "display_order": category.display_order,
    }


def list_products(category_id=None) -> dict:
    products_repo = current_domain.repository_for(Product)
    if category_id is not None:
        products = products_repo.in_category(category_id)
    else:
        products = products_repo.active_products()

    categories = current_domain.repository_for(Category).in_display_order()

    logger.debug("Products listed", category_id=category_id, count=len(products))
    return {
        "products": [_product_row(product) for product in products],
        "categories": [_category_row(category) for category in categories],
    }
