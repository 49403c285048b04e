import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .models.user import User
from .models.category import Category
from .models.menu_item import MenuItem

logger = logging.getLogger(__name__)

_IMAGE = "https://images.unsplash.com/photo-{}?w=600&h=400&fit=crop&crop=center"

DEMO_USER = {
    "telegram_id": "123456789",
    "first_name": "Алексей",
    "last_name": "Иванов",
    "username": "alexivanov",
    "phone": "+998901234567",
}

# Категория -> блюда в порядке показа
DEMO_MENU = [
    (
        {"name": "Пицца", "description": "Свежая пицца на тонком тесте", "image": "🍕"},
        [
            ("Пицца Маргарита", "Классическая пицца с томатным соусом, моцареллой и свежим базиликом",
             "89000", "1604382355076-af4b0eb60143", 15,
             ["томатный соус", "моцарелла", "свежий базилик", "оливковое масло"],
             ["глютен", "молочные продукты"], ["вегетарианская", "популярная"]),
            ("Пицца Пепперони", "Классическая пицца с пепперони и сыром моцарелла",
             "125000", "1565299624946-b28f40a0ca4b", 15,
             ["томатный соус", "моцарелла", "пепперони"],
             ["глютен", "молочные продукты"], ["популярная"]),
            ("Пицца Четыре сыра", "Пицца с четырьмя видами сыра: моцарелла, горгонзола, пармезан, рикотта",
             "145000", "1571407970349-bc81e7e96d47", 18,
             ["моцарелла", "горгонзола", "пармезан", "рикотта"],
             ["глютен", "молочные продукты"], ["вегетарианская", "премиум"]),
        ],
    ),
    (
        {"name": "Бургеры", "description": "Сочные бургеры с говядиной и курицей", "image": "🍔"},
        [
            ("Классический бургер", "Сочная говяжья котлета с салатом, помидором и маринованными огурцами",
             "95000", "1572802419224-296b0aeee0d9", 12,
             ["говяжья котлета", "салат", "помидор", "маринованные огурцы", "булочка"],
             ["глютен"], ["популярный"]),
            ("Чикен бургер", "Куриная грудка на гриле с авокадо и майонезом",
             "85000", "1594212699903-ec8a3eca50f5", 12,
             ["куриная грудка", "авокадо", "майонез", "булочка"],
             ["глютен"], ["здоровый"]),
            ("Двойной чизбургер", "Двойная говяжья котлета с сыром чеддер и специальным соусом",
             "135000", "1520072959219-c595dc870360", 15,
             ["двойная говяжья котлета", "чеддер", "специальный соус", "лук", "булочка"],
             ["глютен", "молочные продукты"], ["популярный", "острый"]),
        ],
    ),
    (
        {"name": "Узбекская кухня", "description": "Традиционные узбекские блюда", "image": "🍛"},
        [
            ("Плов", "Традиционный узбекский плов с бараниной, морковью и рисом",
             "65000", "1516684669134-de6f7c473a2a", 25,
             ["баранина", "рис", "морковь", "лук", "специи"],
             [], ["традиционный", "популярный"]),
            ("Лагман", "Традиционная лапша с мясом и овощами в ароматном бульоне",
             "55000", "1569718212165-3a8278d5f624", 20,
             ["лапша", "говядина", "овощи", "зелень", "специи"],
             ["глютен"], ["традиционный", "суп"]),
            ("Шашлык из баранины", "Сочный шашлык из маринованной баранины на мангале",
             "98000", "1555939594-58d7cb561ad1", 18,
             ["баранина", "лук", "специи"],
             [], ["гриль", "популярный"]),
            ("Манты", "Паровые пельмени с мясной начинкой и луком",
             "45000", "1534422298391-e4f8c172dddb", 22,
             ["говядина", "баранина", "лук", "тесто"],
             ["глютен"], ["традиционный", "на пару"]),
        ],
    ),
    (
        {"name": "Напитки", "description": "Освежающие напитки и соки", "image": "🥤"},
        [
            ("Кока-Кола", "Классический освежающий напиток",
             "15000", "1581636625402-29b2a704ef13", 1,
             ["кола"], [], []),
            ("Зеленый чай", "Ароматный зеленый чай высшего качества",
             "12000", "1556679343-c7306c1976bc", 3,
             ["зеленый чай"], [], ["здоровый"]),
            ("Свежевыжатый апельсиновый сок", "100% натуральный апельсиновый сок",
             "25000", "1621506289937-a8e4df240d0b", 2,
             ["свежие апельсины"], [], ["свежий", "витамины"]),
        ],
    ),
]


def seed_demo_data(db: Session) -> bool:
    """Заполняет меню демо-данными, только если категорий ещё нет"""
    try:
        if db.execute(select(Category.id).limit(1)).first() is not None:
            logger.info("Demo data already present, skipping seed")
            return False

        if db.execute(select(User.id).where(User.telegram_id == DEMO_USER["telegram_id"])).first() is None:
            db.add(User(**DEMO_USER))

        items_count = 0
        for category_position, (category_data, items) in enumerate(DEMO_MENU, start=1):
            category = Category(is_active=True, sort_order=category_position, **category_data)
            db.add(category)
            db.flush()  # Получаем ID категории

            for item_position, item in enumerate(items, start=1):
                name, description, price, photo, prep_time, ingredients, allergens, tags = item
                db.add(MenuItem(
                    category_id=category.id,
                    name=name,
                    description=description,
                    price=Decimal(price),
                    image=_IMAGE.format(photo),
                    is_available=True,
                    preparation_time=prep_time,
                    ingredients=ingredients,
                    allergens=allergens,
                    tags=tags,
                    sort_order=item_position,
                ))
                items_count += 1

        db.commit()
        logger.info(f"🌱 Seeded {len(DEMO_MENU)} categories and {items_count} menu items")
        return True

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error seeding demo data: {e}")
        return False
