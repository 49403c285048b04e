from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, Field


def _reject_float(value):
    # Деньги принимаем только строкой или целым числом
    if isinstance(value, (float, bool)):
        raise ValueError("monetary value must be a decimal string or an integer")
    return value


Money = Annotated[
    Decimal,
    BeforeValidator(_reject_float),
    Field(ge=0, max_digits=10, decimal_places=2),
]


def reject_explicit_null(value, info):
    """Частичное обновление не может обнулить обязательное поле"""
    if value is None:
        raise ValueError(f"{info.field_name} may be omitted but not null")
    return value
