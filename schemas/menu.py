from pydantic import BaseModel, Field


class ProteinOption(BaseModel):
    name: str = Field(default=..., description="Protein name")
    is_vegetarian: bool = Field(default=..., description="Is vegetarian")
    price_addition: float = Field(default=0.0, description="Price on top of base", ge=0)


class MenuItemProtein(BaseModel):
    protein_options: ProteinOption = Field(default=..., description="Protein option")


class MenuItem(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)
    name: str = Field(default=..., description="Item name")
    short_description: str | None = Field(default=None, description="Description")
    image_url: str | None = Field(default=None, description="Image URL")
    image_alt_text: str = Field(default="", description="Image alt text")
    base_price: float = Field(default=..., description="Base price", ge=0)
    max_price: float = Field(default=..., description="Highest price", ge=0)
    has_protein_options: bool = Field(default=False, description="Has proteins")
    menu_item_proteins: list[MenuItemProtein] = Field(
        default_factory=list, description="Available proteins"
    )
    category: str | None = Field(default=None, description="Menu category")


class FavoriteMenuItem(BaseModel):
    id: int = Field(default=..., description="ID", gt=0)
    name: str = Field(default=..., description="Item name")
    short_description: str | None = Field(default=None, description="Description")
    image_url: str = Field(default=..., description="Image URL")
    image_alt_text: str = Field(default="", description="Image alt text")
