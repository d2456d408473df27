import streamlit as st
from pydantic import ValidationError

from enums import OrderType
from schemas import CheckoutRequest, Order
from ui.utils import capitalize_words, format_price, show_result
from usecases import CartUsecase, CheckoutUsecase


def render_order(order: Order) -> None:
    st.success(f"Order #{order.id} placed")
    details = f"Status: **{order.status.value}**"
    if order.order_type:
        details = f"{details} | Type: **{order.order_type.value}**"
    st.markdown(details)
    for item in order.items:
        st.markdown(
            f"- {item.quantity} × {capitalize_words(item.name)} "
            f"({format_price(item.line_total)})"
        )
    st.markdown(f"**Total: {format_price(order.total)}**")


def render_checkout_tab(
    cart_usecase: CartUsecase, checkout_usecase: CheckoutUsecase
) -> None:
    """Render the checkout form and the last placed order."""
    st.subheader("Checkout")

    last_order_id = st.session_state["last_order_id"]
    if last_order_id is not None:
        order_result = checkout_usecase.get_order(order_id=last_order_id)
        if show_result(order_result):
            render_order(order_result.data)
        if st.button("Start a new order", key="new_order"):
            st.session_state["last_order_id"] = None
            st.rerun()
        return

    cart_result = cart_usecase.get_cart()
    if not show_result(cart_result):
        return
    if not cart_result.data.items:
        st.info("Add something to your cart first")
        return

    st.markdown(f"Subtotal: **{format_price(cart_result.data.subtotal)}**")
    with st.form("checkout"):
        customer_name = st.text_input("Name")
        email = st.text_input("Email")
        phone = st.text_input("Phone")
        order_type = st.radio(
            "Order type",
            options=list(OrderType),
            format_func=lambda value: value.value.title(),
            horizontal=True,
        )
        address = st.text_input("Delivery address")
        notes = st.text_area("Notes for the kitchen")
        submitted = st.form_submit_button("Place order")

    if not submitted:
        return

    try:
        request = CheckoutRequest(
            customer_name=customer_name,
            email=email,
            phone=phone,
            order_type=order_type,
            address=address or None,
            notes=notes or None,
        )
    except ValidationError as exc:
        for error in exc.errors():
            st.error(error["msg"])
        return

    result = checkout_usecase.checkout(request)
    if show_result(result):
        st.session_state["last_order_id"] = result.data.id
        st.rerun()
