"""Product lookup port.

The ordering context needs a product's name, list price and discount at the
moment an item is added. Adapters resolve them from wherever the catalogue
lives; ordering never reads catalogue storage directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSnapshot:
    """Product details copied into an order item."""

    name: str
    unit_price: float
    discount_percent: float | None = None


class ProductCatalog(ABC):
    @abstractmethod
    def lookup(self, product_id: str) -> ProductSnapshot:
        """Return the current snapshot of ``product_id``."""
        ...
