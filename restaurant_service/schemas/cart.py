from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from .menu_item import MenuItem


class CartItemBase(BaseModel):
    item_id: int
    quantity: int = Field(1, ge=1)
    notes: Optional[str] = None


class CartItemCreate(CartItemBase):
    user_id: int


class CartItemUpdate(BaseModel):
    # quantity <= 0 означает удаление позиции (решает роут)
    quantity: int


class CartItem(CartItemBase):
    id: int
    user_id: int
    quantity: int
    created_at: datetime

    class Config:
        from_attributes = True


class CartLine(CartItem):
    """Позиция корзины с текущими данными блюда"""
    menu_item: MenuItem


class CartSummary(BaseModel):
    user_id: int
    items: List[CartLine]
    total_items: int
    total_amount: Decimal
