"""Order aggregate — the consistency boundary of the ordering domain.

An Order owns its line items. Each item carries a snapshot of the product's
name, unit price and discount taken when the item was added; the live
catalogue is never consulted again for that item.

State Machine:
    IN_ORDER → CONFIRMED → PAID

Status never regresses. The aggregate's total is always recomputed from the
attached items (see ``ordering.order.pricing.calculate_total``).
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.pricing import calculate_total
from shared.errors import Errors

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    IN_ORDER = "IN_ORDER"
    CONFIRMED = "CONFIRMED"
    PAID = "PAID"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.IN_ORDER: {OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: {OrderStatus.PAID},
    OrderStatus.PAID: set(),  # Terminal
}

# Order header fields copied wholesale by OrderRepository.update
HEADER_FIELDS = (
    "created_at",
    "member_card_no",
    "total",
    "status",
    "confirmed",
    "confirmed_at",
    "payment_method",
    "points_used",
    "member_new_balance",
    "paid_at",
    "paid",
)

# Item fields replaced in place when a persisted item is reconciled
ITEM_FIELDS = (
    "product_id",
    "product_name",
    "unit_price",
    "discount_percent",
    "quantity",
)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item with the product snapshot captured when it was added."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    discount_percent = Float(min_value=0.0, max_value=100.0)
    quantity = Integer(required=True, min_value=1)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    member_card_no = String(max_length=20)
    total = Float(required=True, default=0.0)
    status = String(
        required=True,
        max_length=16,
        choices=OrderStatus,
        default=OrderStatus.IN_ORDER.value,
    )
    items = HasMany(OrderItem)
    confirmed = Boolean()
    confirmed_at = DateTime()
    payment_method = String(max_length=20)
    points_used = Float()
    member_new_balance = Float()
    paid = Boolean()
    paid_at = DateTime()
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, member_card_no=None, items=None):
        """Start a new order in IN_ORDER with its total computed from ``items``."""
        order = cls(
            member_card_no=member_card_no,
            status=OrderStatus.IN_ORDER.value,
            total=0.0,
            created_at=datetime.now(UTC),
        )
        for item in items or []:
            order.add_items(item)
        order.recalculate_total()
        return order

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status, message):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS[current]:
            raise Errors.invalid_state(message)

    def recalculate_total(self):
        self.total = float(calculate_total(self.items))

    # -------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------
    def add_item(self, product_id, product_name, unit_price, quantity, discount_percent=None):
        """Append a new line item and recompute the total.

        Items are accepted in every status; a late addition to a confirmed or
        paid order is logged because the total will no longer match what was
        confirmed or charged.
        """
        if OrderStatus(self.status) != OrderStatus.IN_ORDER:
            logger.warning(
                "Item added to an order that is no longer open",
                order_id=str(self.id),
                status=self.status,
                product_id=str(product_id),
            )

        item = OrderItem(
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            discount_percent=discount_percent,
            quantity=quantity,
        )
        self.add_items(item)
        self.recalculate_total()
        return item

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def confirm(self):
        """Confirm the order. Only legal from IN_ORDER."""
        self._assert_can_transition(OrderStatus.CONFIRMED, "Order is already confirmed or paid")

        self.status = OrderStatus.CONFIRMED.value
        self.confirmed = True
        self.confirmed_at = datetime.now(UTC)

    def check_payable(self):
        if OrderStatus(self.status) == OrderStatus.PAID:
            raise Errors.invalid_state("Order is already paid")
        self._assert_can_transition(OrderStatus.PAID, "Order must be confirmed before payment")

    def pay(self, payment_method, member_new_balance, member_card_no=None):
        """Record payment. The whole current total is settled with points.

        A blank ``member_card_no`` counts as not supplied and keeps the card
        already on the order.
        """
        self.check_payable()

        self.status = OrderStatus.PAID.value
        self.payment_method = payment_method
        self.points_used = self.total
        self.member_new_balance = member_new_balance
        self.paid = True
        self.paid_at = datetime.now(UTC)
        if member_card_no:
            self.member_card_no = member_card_no
