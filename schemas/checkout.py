from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator

from enums import OrderStatus, OrderType
from schemas.cart import CartItem


class CheckoutRequest(BaseModel):
    customer_name: str = Field(default=..., description="Customer name", min_length=1)
    email: EmailStr = Field(default=..., description="Contact email")
    phone: str = Field(default=..., description="Contact phone", min_length=7)
    order_type: OrderType = Field(default=OrderType.PICKUP, description="Order type")
    address: str | None = Field(default=None, description="Delivery address")
    notes: str | None = Field(default=None, description="Kitchen notes")

    @model_validator(mode="after")
    def validate_address(self) -> "CheckoutRequest":
        if self.order_type == OrderType.DELIVERY and (
            not self.address or not self.address.strip()
        ):
            msg = "address is required for delivery orders"
            raise ValueError(msg)

        return self


class Order(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)
    status: OrderStatus = Field(default=..., description="Order status")
    order_type: OrderType | None = Field(default=None, description="Order type")
    total: float = Field(default=..., description="Order total", ge=0)
    items: list[CartItem] = Field(default_factory=list, description="Ordered items")
    created_at: datetime = Field(default=..., description="Created at")
