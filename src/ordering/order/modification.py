"""Order modification — adding items.

The product's name, price and discount are looked up once, through the
product lookup port, and copied into the new item.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.product_lookup import get_product_catalog
from shared.errors import wrap_unexpected


@ordering.command(part_of="Order")
class AddOrderItem:
    """Add a product to an order."""

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@ordering.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(AddOrderItem)
    def add_item(self, command):
        with wrap_unexpected("Service error"):
            repo = current_domain.repository_for(Order)
            order = repo.get_by_id(command.order_id)

            snapshot = get_product_catalog().lookup(command.product_id)
            order.add_item(
                product_id=command.product_id,
                product_name=snapshot.name,
                unit_price=snapshot.unit_price,
                discount_percent=snapshot.discount_percent,
                quantity=command.quantity,
            )
            return repo.update(order, items=list(order.items))
