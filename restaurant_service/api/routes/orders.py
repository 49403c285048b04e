from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...schemas.order import Order, OrderStatusUpdate, CheckoutRequest
from ...schemas.order_item import OrderItem
from ...services.order_service import OrderService
from ..dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/{user_id}", response_model=List[Order])
def list_orders(user_id: int, order_service: OrderService = Depends(get_order_service)):
    """История заказов пользователя"""
    return order_service.list_orders(user_id)


@router.post("", response_model=Order)
def place_order(checkout: CheckoutRequest, order_service: OrderService = Depends(get_order_service)):
    """Оформление заказа из корзины"""
    return order_service.checkout(checkout)


@router.get("/detail/{order_id}", response_model=Order)
def get_order(order_id: int, order_service: OrderService = Depends(get_order_service)):
    """Получить заказ по ID"""
    order = order_service.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/detail/{order_id}/items", response_model=List[OrderItem])
def list_order_items(order_id: int, order_service: OrderService = Depends(get_order_service)):
    """Позиции заказа с ценами на момент оформления"""
    if not order_service.get_order(order_id):
        raise HTTPException(status_code=404, detail="Order not found")
    return order_service.list_order_items(order_id)


@router.patch("/detail/{order_id}/status", response_model=Order)
def update_order_status(
        order_id: int,
        update: OrderStatusUpdate,
        order_service: OrderService = Depends(get_order_service)
):
    """Обновить статус заказа"""
    order = order_service.update_order_status(order_id, update.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
