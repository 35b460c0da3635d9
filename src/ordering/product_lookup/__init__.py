"""Product lookup factory.

Provides get_product_catalog() / set_product_catalog() to swap implementations.
Defaults to FakeProductCatalog.
"""

from ordering.product_lookup.fake_adapter import FakeProductCatalog
from ordering.product_lookup.port import ProductCatalog

_current_catalog: ProductCatalog | None = None


def get_product_catalog() -> ProductCatalog:
    global _current_catalog
    if _current_catalog is None:
        _current_catalog = FakeProductCatalog()
    return _current_catalog


def set_product_catalog(catalog: ProductCatalog) -> None:
    """Override the active product catalogue (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_product_catalog() -> None:
    global _current_catalog
    _current_catalog = None
