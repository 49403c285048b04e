import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, delete, update, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import contains_eager

from ..models.cart import Cart
from ..models.menu_item import MenuItem
from ..schemas.cart import CartSummary
from .base import BaseService

logger = logging.getLogger(__name__)

# Диалекты с атомарным INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

CENTS = Decimal("0.01")


def cart_total(items: List[Cart]) -> Decimal:
    """Сумма позиций по текущим ценам блюд"""
    total = sum((Decimal(item.menu_item.price) * item.quantity for item in items), Decimal("0"))
    return total.quantize(CENTS)


class CartService(BaseService):
    """Корзина пользователя: одна строка на пару (user_id, item_id)"""

    def get_cart_items(self, user_id: int, for_update: bool = False) -> List[Cart]:
        """Позиции корзины вместе с текущими данными блюда"""
        with self._storage_errors("get_cart_items", "cart"):
            query = (
                select(Cart)
                .join(MenuItem, Cart.item_id == MenuItem.id)
                .options(contains_eager(Cart.menu_item))
                .where(Cart.user_id == user_id)
                .order_by(Cart.id.asc())
            )
            if for_update:
                query = query.with_for_update(of=Cart)
            return list(self.db.execute(query).scalars().all())

    def get_cart(self, user_id: int) -> CartSummary:
        """Получить корзину с подсчётом итогов"""
        items = self.get_cart_items(user_id)
        return CartSummary(
            user_id=user_id,
            items=items,
            total_items=sum(item.quantity for item in items),
            total_amount=cart_total(items),
        )

    def get_cart_total(self, user_id: int) -> Decimal:
        return cart_total(self.get_cart_items(user_id))

    def add_to_cart(self, user_id: int, item_id: int, quantity: int = 1, notes: Optional[str] = None) -> Cart:
        """Добавить блюдо; если оно уже в корзине, количество суммируется"""
        with self._storage_errors("add_to_cart", "cart"):
            insert = _UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
            if insert is not None:
                self._upsert(insert, user_id, item_id, quantity, notes)
            else:
                self._merge(user_id, item_id, quantity, notes)
            self.db.commit()

            item = self.db.execute(
                select(Cart)
                .where(Cart.user_id == user_id, Cart.item_id == item_id)
                .execution_options(populate_existing=True)
            ).scalar_one()

        logger.info(f"🛒 Item {item_id} in cart of user {user_id}: quantity {item.quantity}")
        return item

    def update_cart_item(self, cart_item_id: int, quantity: int) -> Optional[Cart]:
        """Установить количество напрямую, без суммирования"""
        with self._storage_errors("update_cart_item", "cart"):
            item = self.db.get(Cart, cart_item_id)
            if not item:
                logger.warning(f"⚠️ Cart item {cart_item_id} not found for update")
                return None

            item.quantity = quantity
            self.db.commit()
            self.db.refresh(item)

        return item

    def remove_from_cart(self, cart_item_id: int) -> bool:
        with self._storage_errors("remove_from_cart", "cart"):
            result = self.db.execute(delete(Cart).where(Cart.id == cart_item_id))
            self.db.commit()

        if result.rowcount > 0:
            logger.info(f"🗑️ Cart item {cart_item_id} removed")
            return True
        return False

    def clear_cart(self, user_id: int) -> bool:
        """Очистить корзину; пустая корзина тоже считается успехом"""
        with self._storage_errors("clear_cart", "cart"):
            result = self.db.execute(delete(Cart).where(Cart.user_id == user_id))
            self.db.commit()

        logger.info(f"🧹 Cart cleared for user {user_id}: {result.rowcount} items removed")
        return True

    def _upsert(self, insert, user_id: int, item_id: int, quantity: int, notes: Optional[str]):
        table = Cart.__table__
        stmt = insert(table).values(
            user_id=user_id,
            item_id=item_id,
            quantity=quantity,
            notes=notes,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "item_id"],
            set_={
                "quantity": table.c.quantity + stmt.excluded.quantity,
                "notes": func.coalesce(stmt.excluded.notes, table.c.notes),
            },
        )
        self.db.execute(stmt)

    def _merge(self, user_id: int, item_id: int, quantity: int, notes: Optional[str]):
        # Параллельная первая вставка упрётся в uq_carts_user_item -> ConstraintViolation
        if not self._increment(user_id, item_id, quantity, notes):
            self.db.add(Cart(user_id=user_id, item_id=item_id, quantity=quantity, notes=notes))

    def _increment(self, user_id: int, item_id: int, quantity: int, notes: Optional[str]) -> bool:
        """UPDATE quantity = quantity + :q; True, если строка уже была"""
        values = {"quantity": Cart.quantity + quantity}
        if notes is not None:
            values["notes"] = notes
        result = self.db.execute(
            update(Cart)
            .where(Cart.user_id == user_id, Cart.item_id == item_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

