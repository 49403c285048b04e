from .user_service import UserService
from .menu_service import MenuService
from .cart_service import CartService
from .order_service import OrderService

__all__ = [
    "UserService",
    "MenuService",
    "CartService",
    "OrderService",
]
