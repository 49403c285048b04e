from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from .types import Money, reject_explicit_null


class MenuItemBase(BaseModel):
    category_id: int
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Money
    image: Optional[str] = None
    is_available: bool = True
    preparation_time: int = Field(15, ge=0)  # минуты
    ingredients: List[str] = []
    allergens: List[str] = []
    tags: List[str] = []
    sort_order: int = 0


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(BaseModel):
    category_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Money] = None
    image: Optional[str] = None
    is_available: Optional[bool] = None
    preparation_time: Optional[int] = Field(None, ge=0)
    ingredients: Optional[List[str]] = None
    allergens: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    sort_order: Optional[int] = None

    @field_validator(
        "category_id", "name", "price", "is_available", "preparation_time", "sort_order"
    )
    @classmethod
    def check_not_null(cls, value, info):
        return reject_explicit_null(value, info)


class MenuItem(MenuItemBase):
    id: int
    ingredients: Optional[List[str]] = None
    allergens: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    class Config:
        from_attributes = True
