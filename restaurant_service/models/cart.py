from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class Cart(Base):
    """Позиция корзины: одна строка на пару (пользователь, блюдо)"""
    __tablename__ = "carts"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_carts_user_item"),
        CheckConstraint("quantity >= 1", name="ck_carts_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Связи
    user = relationship("User", back_populates="cart_items")
    menu_item = relationship(
        "MenuItem",
        primaryjoin="foreign(Cart.item_id) == MenuItem.id",
        viewonly=True,
    )
