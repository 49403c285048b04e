from sqlalchemy import Column, Integer, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class OrderItem(Base):
    """Снимок позиции корзины на момент оформления заказа"""
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(Integer, nullable=False)  # без внешнего ключа: блюдо может быть удалено

    # Количество и цена за единицу на момент заказа
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=True)

    # Связи
    order = relationship("Order", back_populates="items")
    menu_item = relationship(
        "MenuItem",
        primaryjoin="foreign(OrderItem.item_id) == MenuItem.id",
        viewonly=True,
        lazy="joined",
    )
