from typing import Union

from fastapi import APIRouter, Depends, HTTPException

from ...schemas.cart import CartItem, CartItemCreate, CartItemUpdate, CartSummary
from ...services.cart_service import CartService
from ...services.menu_service import MenuService
from ..dependencies import get_cart_service, get_menu_service

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("/{user_id}", response_model=CartSummary)
def get_cart(user_id: int, cart_service: CartService = Depends(get_cart_service)):
    """Получение текущей корзины пользователя"""
    return cart_service.get_cart(user_id)


@router.post("", response_model=CartItem)
def add_item_to_cart(
        item: CartItemCreate,
        cart_service: CartService = Depends(get_cart_service),
        menu_service: MenuService = Depends(get_menu_service)
):
    """Добавление блюда в корзину"""
    menu_item = menu_service.get_menu_item(item.item_id)
    if not menu_item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    if not menu_item.is_available:
        raise HTTPException(status_code=400, detail="Menu item is not available")

    return cart_service.add_to_cart(item.user_id, item.item_id, item.quantity, item.notes)


@router.put("/{cart_item_id}", response_model=Union[CartItem, dict])
def update_cart_item(
        cart_item_id: int,
        item: CartItemUpdate,
        cart_service: CartService = Depends(get_cart_service)
):
    """Обновление количества; 0 и меньше удаляет позицию"""
    if item.quantity <= 0:
        if not cart_service.remove_from_cart(cart_item_id):
            raise HTTPException(status_code=404, detail="Item not found in cart")
        return {"message": "Item removed from cart (quantity was 0 or less)"}

    result = cart_service.update_cart_item(cart_item_id, item.quantity)
    if result is None:
        raise HTTPException(status_code=404, detail="Item not found in cart")
    return result


@router.delete("/user/{user_id}")
def clear_cart(user_id: int, cart_service: CartService = Depends(get_cart_service)):
    """Очистка корзины"""
    cart_service.clear_cart(user_id)
    return {"message": "Cart cleared successfully"}


@router.delete("/{cart_item_id}")
def remove_item_from_cart(cart_item_id: int, cart_service: CartService = Depends(get_cart_service)):
    """Удаление позиции из корзины"""
    if not cart_service.remove_from_cart(cart_item_id):
        raise HTTPException(status_code=404, detail="Item not found in cart")
    return {"message": "Item removed from cart"}
