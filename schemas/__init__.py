from schemas.cart import Cart, CartItem, CartItemRequest, CartItemUpdateRequest
from schemas.checkout import CheckoutRequest, Order
from schemas.menu import FavoriteMenuItem, MenuItem, MenuItemProtein, ProteinOption
from schemas.result import ActionFailure, ActionResult, ActionSuccess
from schemas.testimonial import Testimonial

__all__ = [
    "ActionFailure",
    "ActionResult",
    "ActionSuccess",
    "Cart",
    "CartItem",
    "CartItemRequest",
    "CartItemUpdateRequest",
    "CheckoutRequest",
    "FavoriteMenuItem",
    "MenuItem",
    "MenuItemProtein",
    "Order",
    "ProteinOption",
    "Testimonial",
]
