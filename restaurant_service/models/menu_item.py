from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, JSON
from ..database import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, nullable=False, index=True)  # без внешнего ключа
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String, nullable=True)
    is_available = Column(Boolean, default=True)
    preparation_time = Column(Integer, default=15)  # в минутах

    # Списки строк (JSON работает и в PostgreSQL, и в SQLite)
    ingredients = Column(JSON, default=list)
    allergens = Column(JSON, default=list)
    tags = Column(JSON, default=list)  # вегетарианское, острое, популярное...

    sort_order = Column(Integer, default=0, index=True)
