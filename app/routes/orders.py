from typing import List

from fastapi import APIRouter, Depends, status

from app.dependencies.services import get_order_service
from app.models.user import User
from app.schemas.orders_schemas import CreateOrderRequest, OrderResponse
from app.services.order_service import OrderService
from app.utils.token import get_current_user

router = APIRouter()


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    data: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
    current_user: User = Depends(get_current_user)
):
    return service.create_order(
        items=data.items,
        payment_method=data.payment_method,
        order_type=data.order_type,
        delivery_address=data.delivery_address,
        owner=current_user,
    )


@router.get("", response_model=List[OrderResponse])
def list_my_orders(
    service: OrderService = Depends(get_order_service),
    current_user: User = Depends(get_current_user)
):
    return service.list_orders_for_user(current_user.id)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
    current_user: User = Depends(get_current_user)
):
    return service.get_order(order_id, current_user.id)


# Cancelling keeps the row; the order moves to CANCELLED
@router.delete("/{order_id}", response_model=OrderResponse)
def cancel_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
    current_user: User = Depends(get_current_user)
):
    return service.cancel_order(order_id, current_user.id)
