from pydantic import BaseModel, model_validator
from typing import Optional
from datetime import datetime

from ..models.order import OrderStatus, DeliveryType, PaymentMethod
from .types import Money


class OrderCreate(BaseModel):
    user_id: int
    total_amount: Money
    delivery_address: Optional[str] = None
    delivery_type: DeliveryType = DeliveryType.DELIVERY
    payment_method: PaymentMethod = PaymentMethod.CASH
    notes: Optional[str] = None
    estimated_delivery_time: Optional[datetime] = None
    # Игнорируется: новый заказ всегда pending
    status: Optional[str] = None


class CheckoutRequest(BaseModel):
    user_id: int
    delivery_type: DeliveryType = DeliveryType.DELIVERY
    payment_method: PaymentMethod = PaymentMethod.CASH
    delivery_address: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_delivery_address(self):
        if self.delivery_type == DeliveryType.DELIVERY:
            if not self.delivery_address or not self.delivery_address.strip():
                raise ValueError("delivery_address is required for delivery orders")
            self.delivery_address = self.delivery_address.strip()
        else:
            self.delivery_address = None
        if self.notes is not None:
            self.notes = self.notes.strip() or None
        return self


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class Order(BaseModel):
    id: int
    user_id: int
    status: OrderStatus
    total_amount: Money
    delivery_address: Optional[str] = None
    delivery_type: DeliveryType
    payment_method: PaymentMethod
    notes: Optional[str] = None
    estimated_delivery_time: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
