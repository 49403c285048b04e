from enum import Enum as PyEnum

from sqlalchemy import Column, Integer, String, DateTime, Enum, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class OrderStatus(str, PyEnum):
    PENDING = "pending"  # Ожидает подтверждения
    CONFIRMED = "confirmed"  # Подтвержден
    PREPARING = "preparing"  # Готовится
    READY = "ready"  # Готов
    DELIVERED = "delivered"  # Доставлен
    CANCELLED = "cancelled"  # Отменен


class DeliveryType(str, PyEnum):
    DELIVERY = "delivery"
    PICKUP = "pickup"


class PaymentMethod(str, PyEnum):
    CASH = "cash"
    CARD = "card"
    TELEGRAM_WALLET = "telegram_wallet"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Статус заказа
    status = Column(
        Enum(OrderStatus, native_enum=False, length=20, values_callable=_enum_values),
        default=OrderStatus.PENDING,
        nullable=False
    )

    # Сумма
    total_amount = Column(Numeric(10, 2), nullable=False)

    # Доставка и оплата
    delivery_address = Column(Text, nullable=True)
    delivery_type = Column(
        Enum(DeliveryType, native_enum=False, length=20, values_callable=_enum_values),
        default=DeliveryType.DELIVERY,
        nullable=False
    )
    payment_method = Column(
        Enum(PaymentMethod, native_enum=False, length=20, values_callable=_enum_values),
        default=PaymentMethod.CASH,
        nullable=False
    )

    notes = Column(Text, nullable=True)

    # Временные метки
    estimated_delivery_time = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Связи
    user = relationship("User", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
