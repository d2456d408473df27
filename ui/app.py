import logfire
import streamlit as st

from settings import logfire_settings
from ui.state import get_client, init_state
from ui.tabs import (
    render_cart_tab,
    render_checkout_tab,
    render_home_tab,
    render_menu_tab,
)
from usecases import CartUsecase, CheckoutUsecase, MenuUsecase


@st.cache_resource
def configure_logging() -> None:
    logfire.configure(
        token=logfire_settings.token,
        service_name=logfire_settings.service_name,
        environment=logfire_settings.environment,
        send_to_logfire="if-token-present",
    )


def main() -> None:
    st.set_page_config(page_title="Restaurant", layout="wide")
    configure_logging()
    init_state()

    client = get_client()
    menu_usecase = MenuUsecase(client=client)
    cart_usecase = CartUsecase(client=client)
    checkout_usecase = CheckoutUsecase(client=client)

    tabs = st.tabs(["Home", "Menu", "Cart", "Checkout"])
    with tabs[0]:
        render_home_tab(menu_usecase)
    with tabs[1]:
        render_menu_tab(menu_usecase, cart_usecase)
    with tabs[2]:
        render_cart_tab(cart_usecase)
    with tabs[3]:
        render_checkout_tab(cart_usecase, checkout_usecase)


if __name__ == "__main__":
    main()
