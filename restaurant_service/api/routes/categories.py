from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...schemas.category import Category, CategoryCreate, CategoryUpdate
from ...services.menu_service import MenuService
from ..dependencies import get_menu_service

router = APIRouter(prefix="/categories", tags=["menu"])


@router.get("", response_model=List[Category])
def list_categories(menu_service: MenuService = Depends(get_menu_service)):
    return menu_service.list_categories()


@router.get("/{category_id}", response_model=Category)
def get_category(category_id: int, menu_service: MenuService = Depends(get_menu_service)):
    category = menu_service.get_category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=Category)
def create_category(category: CategoryCreate, menu_service: MenuService = Depends(get_menu_service)):
    return menu_service.create_category(category)


@router.patch("/{category_id}", response_model=Category)
def update_category(
        category_id: int,
        updates: CategoryUpdate,
        menu_service: MenuService = Depends(get_menu_service)
):
    category = menu_service.update_category(category_id, updates)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.delete("/{category_id}")
def delete_category(category_id: int, menu_service: MenuService = Depends(get_menu_service)):
    if not menu_service.delete_category(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted"}
