"""Order payment — settle a confirmed order with member points.

The order's guards are checked before any points are deducted, so a rejected
payment never touches the member's balance.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.member_points import get_member_points
from ordering.order.order import Order
from shared.errors import wrap_unexpected

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PayOrder:
    order_id = Identifier(required=True)
    payment_method = String(required=True, max_length=20)
    member_card_no = String(max_length=20)
    point_transaction_id = String(max_length=50)


@ordering.command_handler(part_of=Order)
class PayOrderHandler:
    @handle(PayOrder)
    def pay_order(self, command):
        with wrap_unexpected("Service error"):
            repo = current_domain.repository_for(Order)
            order = repo.get_by_id(command.order_id)
            order.check_payable()

            new_balance = get_member_points().deduct(
                member_card_no=command.member_card_no or order.member_card_no,
                points=order.total,
                point_transaction_id=command.point_transaction_id,
            )
            order.pay(
                payment_method=command.payment_method,
                member_new_balance=new_balance,
                member_card_no=command.member_card_no,
            )
            logger.info(
                "Order paid",
                order_id=str(order.id),
                points_used=order.points_used,
                member_new_balance=new_balance,
            )
            return repo.update(order, items=list(order.items))
