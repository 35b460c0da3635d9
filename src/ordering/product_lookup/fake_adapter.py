"""Configurable fake product catalogue for development and testing.

Unknown products resolve to a generic ``Product <id>`` priced at 300.00 with
no discount. Individual products can be overridden, and the whole adapter
can be switched to fail with a connectivity error.
"""

from ordering.product_lookup.port import ProductCatalog, ProductSnapshot

DEFAULT_UNIT_PRICE = 300.0


class FakeProductCatalog(ProductCatalog):
    def __init__(self) -> None:
        self.products: dict[str, ProductSnapshot] = {}
        self.failure: Exception | None = None
        self.calls: list[str] = []

    def configure(self, failure: Exception | None = None) -> None:
        """Make every subsequent lookup raise ``failure`` (or succeed again with ``None``)."""
        self.failure = failure

    def register(self, product_id: str, name: str, unit_price: float, discount_percent: float | None = None) -> None:
        self.products[str(product_id)] = ProductSnapshot(
            name=name,
            unit_price=unit_price,
            discount_percent=discount_percent,
        )

    def lookup(self, product_id: str) -> ProductSnapshot:
        self.calls.append(str(product_id))

        if self.failure is not None:
            raise self.failure

        snapshot = self.products.get(str(product_id))
        if snapshot is None:
            snapshot = ProductSnapshot(name=f"Product {product_id}", unit_price=DEFAULT_UNIT_PRICE, discount_percent=0)
        return snapshot
