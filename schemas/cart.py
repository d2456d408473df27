from pydantic import BaseModel, Field, computed_field


class CartItemRequest(BaseModel):
    menu_item_id: int = Field(default=..., description="Menu item ID", gt=0)
    protein: str | None = Field(default=None, description="Selected protein")
    quantity: int = Field(default=1, description="Quantity", ge=1)


class CartItemUpdateRequest(BaseModel):
    quantity: int = Field(default=..., description="Quantity", ge=1)


class CartItem(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)
    menu_item_id: int = Field(default=..., description="Menu item ID", gt=0)
    name: str = Field(default=..., description="Item name")
    protein: str | None = Field(default=None, description="Selected protein")
    quantity: int = Field(default=..., description="Quantity", ge=1)
    unit_price: float = Field(default=..., description="Unit price", ge=0)

    @computed_field
    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)


class Cart(BaseModel):
    items: list[CartItem] = Field(default_factory=list, description="Cart items")

    @computed_field
    @property
    def subtotal(self) -> float:
        return round(sum(item.line_total for item in self.items), 2)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
