from fastapi import APIRouter
from .routes import users_router, categories_router, menu_items_router, cart_router, orders_router

# Создаем основной API router
api_router = APIRouter(prefix="/api")

# Подключаем роуты
api_router.include_router(users_router)
api_router.include_router(categories_router)
api_router.include_router(menu_items_router)
api_router.include_router(cart_router)
api_router.include_router(orders_router)

__all__ = ["api_router"]
