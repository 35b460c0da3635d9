"""FastAPI routes for the Ordering domain."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddOrderItemRequest,
    CreateOrderRequest,
    OrderResponse,
    PayOrderRequest,
)
from ordering.order.confirmation import ConfirmOrder
from ordering.order.creation import CreateOrder
from ordering.order.deletion import DeleteOrder
from ordering.order.modification import AddOrderItem
from ordering.order.order import Order, OrderStatus
from ordering.order.payment import PayOrder

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    command = CreateOrder(member_card_no=body.member_card_no)
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(status: OrderStatus) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).list_by_status(status)
    return [OrderResponse.from_order(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get_by_id(order_id)
    return OrderResponse.from_order(order)


@order_router.post("/{order_id}/items", response_model=OrderResponse)
async def add_order_item(order_id: str, body: AddOrderItemRequest) -> OrderResponse:
    command = AddOrderItem(
        order_id=order_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(order)


@order_router.put("/{order_id}/confirm", response_model=OrderResponse)
async def confirm_order(order_id: str) -> OrderResponse:
    order = current_domain.process(ConfirmOrder(order_id=order_id), asynchronous=False)
    return OrderResponse.from_order(order)


@order_router.put("/{order_id}/pay", response_model=OrderResponse)
async def pay_order(order_id: str, body: PayOrderRequest) -> OrderResponse:
    command = PayOrder(
        order_id=order_id,
        payment_method=body.payment_method,
        member_card_no=body.member_card_no,
        point_transaction_id=body.point_transaction_id,
    )
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(order)


@order_router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str) -> Response:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return Response(status_code=204)
