from .users import router as users_router
from .categories import router as categories_router
from .menu_items import router as menu_items_router
from .cart import router as cart_router
from .orders import router as orders_router

__all__ = [
    "users_router",
    "categories_router",
    "menu_items_router",
    "cart_router",
    "orders_router",
]
