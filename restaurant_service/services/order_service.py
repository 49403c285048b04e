import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy import select, delete, update

from ..config import settings
from ..database import utcnow
from ..exceptions import EmptyCartError, InvalidOrderStatus
from ..models.cart import Cart
from ..models.order import Order, OrderStatus, DeliveryType
from ..models.order_item import OrderItem
from ..schemas.order import OrderCreate, CheckoutRequest
from ..schemas.order_item import OrderItemCreate
from .base import BaseService
from .cart_service import CartService, cart_total

logger = logging.getLogger(__name__)


class OrderService(BaseService):
    """Сервис для работы с заказами"""

    def __init__(self, db, delivery_time_minutes: int = None):
        super().__init__(db)
        if delivery_time_minutes is None:
            delivery_time_minutes = settings.delivery_time_minutes
        self.delivery_time_minutes = delivery_time_minutes

    def list_orders(self, user_id: int) -> List[Order]:
        """Заказы пользователя, от старых к новым"""
        with self._storage_errors("list_orders", "order"):
            query = (
                select(Order)
                .where(Order.user_id == user_id)
                .order_by(Order.created_at.asc(), Order.id.asc())
            )
            return list(self.db.execute(query).scalars().all())

    def get_order(self, order_id: int) -> Optional[Order]:
        with self._storage_errors("get_order", "order"):
            return self.db.get(Order, order_id)

    def create_order(self, order_data: OrderCreate) -> Order:
        """Создать заказ; статус всегда pending"""
        with self._storage_errors("create_order", "order"):
            order = Order(
                **order_data.model_dump(exclude={"status"}),
                status=OrderStatus.PENDING,
            )
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)

        logger.info(f"✅ Order {order.id} created for user {order.user_id}")
        return order

    def update_order_status(self, order_id: int, status) -> Optional[Order]:
        """Обновляет статус заказа и сдвигает updated_at вперёд"""
        try:
            status = OrderStatus(status)
        except ValueError:
            raise InvalidOrderStatus(status) from None

        with self._storage_errors("update_order_status", "order"):
            order = self.db.get(Order, order_id, with_for_update=True)
            if not order:
                logger.warning(f"⚠️ Order {order_id} not found for status update")
                return None

            # updated_at строго возрастает даже при грубых часах
            now = utcnow()
            if order.updated_at is not None and now <= order.updated_at:
                now = order.updated_at + timedelta(microseconds=1)

            order.status = status
            order.updated_at = now
            self.db.commit()
            self.db.refresh(order)

        logger.info(f"✅ Order {order_id} status updated to {status.value}")
        return order

    def list_order_items(self, order_id: int) -> List[OrderItem]:
        """Позиции заказа с текущими данными блюда (если оно ещё есть)"""
        with self._storage_errors("list_order_items", "order_item"):
            query = (
                select(OrderItem)
                .where(OrderItem.order_id == order_id)
                .order_by(OrderItem.id.asc())
            )
            return list(self.db.execute(query).scalars().all())

    def create_order_item(self, item_data: OrderItemCreate) -> OrderItem:
        with self._storage_errors("create_order_item", "order_item"):
            order_item = OrderItem(**item_data.model_dump())
            self.db.add(order_item)
            self.db.commit()
            self.db.refresh(order_item)
        return order_item

    def checkout(self, checkout: CheckoutRequest) -> Order:
        """
        Оформляет заказ из корзины в одной транзакции:
        сумма по текущим ценам, заказ, снимки позиций, очистка корзины.
        Строки корзины читаются с блокировкой; позиции, добавленные
        параллельно после чтения, остаются в корзине.
        """
        user_id = checkout.user_id
        lines = CartService(self.db).get_cart_items(user_id, for_update=True)
        if not lines:
            raise EmptyCartError(user_id)

        with self._storage_errors("checkout", "order"):
            total_amount = cart_total(lines)

            order = Order(
                user_id=user_id,
                status=OrderStatus.PENDING,
                total_amount=total_amount,
                delivery_address=checkout.delivery_address,
                delivery_type=checkout.delivery_type,
                payment_method=checkout.payment_method,
                notes=checkout.notes,
                estimated_delivery_time=self._estimate_delivery(lines, checkout.delivery_type),
            )
            self.db.add(order)
            self.db.flush()  # Получаем ID заказа

            # Цена за единицу замораживается на момент заказа
            for line in lines:
                self.db.add(OrderItem(
                    order_id=order.id,
                    item_id=line.item_id,
                    quantity=line.quantity,
                    price=line.menu_item.price,
                    notes=line.notes,
                ))

            for line in lines:
                self._consume_cart_line(line)
            self.db.commit()
            self.db.refresh(order)

        logger.info(f"🧾 Order {order.id} placed by user {user_id}: {len(lines)} lines, total {order.total_amount}")
        return order

    def _consume_cart_line(self, line: Cart):
        """Убирает из корзины ровно то, что попало в заказ"""
        consumed = self.db.execute(
            delete(Cart)
            .where(Cart.id == line.id, Cart.quantity == line.quantity)
            .execution_options(synchronize_session=False)
        )
        if consumed.rowcount == 0:
            # Строку дополнили после чтения: остаток остаётся в корзине
            self.db.execute(
                update(Cart)
                .where(Cart.id == line.id)
                .values(quantity=Cart.quantity - line.quantity)
                .execution_options(synchronize_session=False)
            )

    def _estimate_delivery(self, lines: List[Cart], delivery_type: DeliveryType):
        minutes = max((line.menu_item.preparation_time or 0) for line in lines)
        if delivery_type == DeliveryType.DELIVERY:
            minutes += self.delivery_time_minutes
        return utcnow() + timedelta(minutes=minutes)
