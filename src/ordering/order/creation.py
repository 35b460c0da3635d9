"""Order creation — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import wrap_unexpected


@ordering.command(part_of="Order")
class CreateOrder:
    member_card_no = String(max_length=20)


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        with wrap_unexpected("Service error"):
            order = Order.create(member_card_no=command.member_card_no)
            return current_domain.repository_for(Order).create(order)
