import streamlit as st

from schemas import CartItem
from ui.utils import capitalize_words, format_price, show_result
from usecases import CartUsecase


def render_cart_item(item: CartItem, cart_usecase: CartUsecase) -> None:
    name_column, quantity_column, total_column, remove_column = st.columns(
        [4, 2, 2, 1]
    )
    label = capitalize_words(item.name)
    if item.protein:
        label = f"{label} ({item.protein})"
    name_column.markdown(f"**{label}**  \n{format_price(item.unit_price)} each")

    quantity = quantity_column.number_input(
        "Quantity",
        min_value=1,
        max_value=20,
        value=item.quantity,
        key=f"cart_quantity_{item.id}",
        label_visibility="collapsed",
    )
    if quantity != item.quantity:
        result = cart_usecase.update_item(item_id=item.id, quantity=int(quantity))
        if show_result(result):
            st.rerun()

    total_column.markdown(format_price(item.line_total))
    if remove_column.button("✕", key=f"cart_remove_{item.id}"):
        if show_result(cart_usecase.remove_item(item_id=item.id)):
            st.rerun()


def render_cart_tab(cart_usecase: CartUsecase) -> None:
    st.subheader("Your cart")
    result = cart_usecase.get_cart()
    if not show_result(result):
        return

    cart = result.data
    if not cart.items:
        st.info("Your cart is empty")
        return

    for item in cart.items:
        render_cart_item(item, cart_usecase)

    st.divider()
    st.markdown(f"**Subtotal: {format_price(cart.subtotal)}**")
    if st.button("Clear cart", key="clear_cart"):
        if show_result(cart_usecase.clear_cart(), "Cart cleared"):
            st.rerun()
