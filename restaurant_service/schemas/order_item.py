from pydantic import BaseModel, Field
from typing import Optional

from .menu_item import MenuItem
from .types import Money


class OrderItemCreate(BaseModel):
    order_id: int
    item_id: int
    quantity: int = Field(..., ge=1)
    price: Money
    notes: Optional[str] = None


class OrderItem(BaseModel):
    id: int
    order_id: int
    item_id: int
    quantity: int
    price: Money
    notes: Optional[str] = None

    # Текущие данные блюда; None, если блюдо уже удалено из меню
    menu_item: Optional[MenuItem] = None

    class Config:
        from_attributes = True
