"""Order confirmation — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import wrap_unexpected


@ordering.command(part_of="Order")
class ConfirmOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class ConfirmOrderHandler:
    @handle(ConfirmOrder)
    def confirm_order(self, command):
        with wrap_unexpected("Service error"):
            repo = current_domain.repository_for(Order)
            order = repo.get_by_id(command.order_id)
            order.confirm()
            return repo.update(order, items=list(order.items))
