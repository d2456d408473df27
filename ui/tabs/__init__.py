from ui.tabs.cart import render_cart_tab
from ui.tabs.checkout import render_checkout_tab
from ui.tabs.home import render_home_tab
from ui.tabs.menu import render_menu_tab

__all__ = [
    "render_cart_tab",
    "render_checkout_tab",
    "render_home_tab",
    "render_menu_tab",
]
