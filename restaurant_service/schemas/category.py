from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .types import reject_explicit_null


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("name", "is_active", "sort_order")
    @classmethod
    def check_not_null(cls, value, info):
        return reject_explicit_null(value, info)


class Category(CategoryBase):
    id: int

    class Config:
        from_attributes = True
