from decimal import Decimal

import pytest
from pydantic import ValidationError

from restaurant_service.models.order import DeliveryType
from restaurant_service.schemas.category import CategoryUpdate
from restaurant_service.schemas.menu_item import MenuItemCreate, MenuItemUpdate
from restaurant_service.schemas.order import CheckoutRequest
from restaurant_service.schemas.user import UserCreate


def test_menu_item_price_accepts_decimal_strings():
    item = MenuItemCreate(category_id=1, name="Плов", price="65000")

    assert item.price == Decimal("65000")
    assert item.preparation_time == 15
    assert item.ingredients == []
    assert item.is_available is True


def test_menu_item_validation_reports_every_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        MenuItemCreate(category_id="first", name="", price=12.5, tags="spicy")

    locations = {error["loc"][0] for error in exc_info.value.errors()}
    assert {"category_id", "name", "price", "tags"} <= locations


def test_money_rejects_too_many_decimal_places():
    with pytest.raises(ValidationError) as exc_info:
        MenuItemCreate(category_id=1, name="Чай", price="12.345")

    assert exc_info.value.errors()[0]["loc"] == ("price",)


def test_money_rejects_negative_values():
    with pytest.raises(ValidationError):
        MenuItemCreate(category_id=1, name="Чай", price="-1")


def test_user_requires_telegram_id_and_first_name():
    with pytest.raises(ValidationError) as exc_info:
        UserCreate()

    locations = {error["loc"][0] for error in exc_info.value.errors()}
    assert locations == {"telegram_id", "first_name"}


def test_partial_update_keeps_only_sent_fields():
    updates = MenuItemUpdate(price="70000")

    assert updates.model_dump(exclude_unset=True) == {"price": Decimal("70000")}


def test_partial_update_rejects_null_for_required_field():
    with pytest.raises(ValidationError):
        CategoryUpdate(name=None)


def test_checkout_delivery_requires_address():
    with pytest.raises(ValidationError):
        CheckoutRequest(user_id=1, delivery_type="delivery", delivery_address="   ")


def test_checkout_pickup_drops_address():
    checkout = CheckoutRequest(
        user_id=1,
        delivery_type="pickup",
        payment_method="telegram_wallet",
        delivery_address="ул. Навои, 12",
        notes="  ",
    )

    assert checkout.delivery_type == DeliveryType.PICKUP
    assert checkout.delivery_address is None
    assert checkout.notes is None


def test_checkout_rejects_unknown_payment_method():
    with pytest.raises(ValidationError):
        CheckoutRequest(user_id=1, delivery_type="pickup", payment_method="bitcoin")
