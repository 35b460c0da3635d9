"""Order deletion — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import wrap_unexpected


@ordering.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        with wrap_unexpected("Service error"):
            current_domain.repository_for(Order).delete(command.order_id)
