"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    member_card_no: str | None = Field(default=None, max_length=20)

    model_config = {"json_schema_extra": {"examples": [{"member_card_no": "M-000123"}]}}


class AddOrderItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class PayOrderRequest(BaseModel):
    payment_method: str = Field(max_length=20)
    member_card_no: str | None = Field(default=None, max_length=20)
    point_transaction_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "payment_method": "POINTS",
                    "member_card_no": "M-000123",
                    "point_transaction_id": "ptx-8842",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str
    unit_price: float
    discount_percent: float | None = None
    quantity: int


class OrderResponse(BaseModel):
    id: str
    member_card_no: str | None = None
    status: str
    total: float
    items: list[OrderItemResponse] = []
    confirmed: bool | None = None
    confirmed_at: datetime | None = None
    payment_method: str | None = None
    points_used: float | None = None
    member_new_balance: float | None = None
    paid: bool | None = None
    paid_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            member_card_no=order.member_card_no,
            status=order.status,
            total=order.total,
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    unit_price=item.unit_price,
                    discount_percent=item.discount_percent,
                    quantity=item.quantity,
                )
                for item in order.items
            ],
            confirmed=order.confirmed,
            confirmed_at=order.confirmed_at,
            payment_method=order.payment_method,
            points_used=order.points_used,
            member_new_balance=order.member_new_balance,
            paid=order.paid,
            paid_at=order.paid_at,
            created_at=order.created_at,
        )
