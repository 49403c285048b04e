from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...schemas.menu_item import MenuItem, MenuItemCreate, MenuItemUpdate
from ...services.menu_service import MenuService
from ..dependencies import get_menu_service

router = APIRouter(prefix="/menu-items", tags=["menu"])


@router.get("", response_model=List[MenuItem])
def list_menu_items(
        category_id: Optional[int] = Query(None, description="Фильтр по категории"),
        menu_service: MenuService = Depends(get_menu_service)
):
    """Блюда меню, включая недоступные: скрывает их клиент"""
    return menu_service.list_menu_items(category_id)


@router.get("/{item_id}", response_model=MenuItem)
def get_menu_item(item_id: int, menu_service: MenuService = Depends(get_menu_service)):
    item = menu_service.get_menu_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.post("", response_model=MenuItem)
def create_menu_item(item: MenuItemCreate, menu_service: MenuService = Depends(get_menu_service)):
    return menu_service.create_menu_item(item)


@router.patch("/{item_id}", response_model=MenuItem)
def update_menu_item(
        item_id: int,
        updates: MenuItemUpdate,
        menu_service: MenuService = Depends(get_menu_service)
):
    item = menu_service.update_menu_item(item_id, updates)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.delete("/{item_id}")
def delete_menu_item(item_id: int, menu_service: MenuService = Depends(get_menu_service)):
    if not menu_service.delete_menu_item(item_id):
        raise HTTPException(status_code=404, detail="Menu item not found")
    return {"message": "Menu item deleted"}
