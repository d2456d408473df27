from tests.factories.base import fake
from tests.factories.cart import CartFactory, CartItemFactory, OrderFactory
from tests.factories.menu import (
    FavoriteMenuItemFactory,
    MenuItemFactory,
    MenuItemProteinFactory,
    ProteinOptionFactory,
)

__all__ = [
    "CartFactory",
    "CartItemFactory",
    "FavoriteMenuItemFactory",
    "MenuItemFactory",
    "MenuItemProteinFactory",
    "OrderFactory",
    "ProteinOptionFactory",
    "fake",
]
