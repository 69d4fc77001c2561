# -------- ADMIN ORDERS --------
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies.admin import require_admin
from app.dependencies.services import get_order_service
from app.models.user import User
from app.schemas.orders_schemas import OrderResponse, UpdateStatusRequest
from app.services.order_service import OrderService

router = APIRouter()


@router.get("/orders", response_model=List[OrderResponse])
def list_all_orders(
    service: OrderService = Depends(get_order_service),
    _: User = Depends(require_admin)
):
    return service.list_all_orders()


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    data: UpdateStatusRequest,
    service: OrderService = Depends(get_order_service),
    _: User = Depends(require_admin),
):
    return service.update_status(order_id, data.status)
