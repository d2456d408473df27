import streamlit as st

from constants import PLACEHOLDER_IMAGE
from schemas import CartItemRequest, MenuItem
from ui.tabs.home import show_image_dialog
from ui.utils import (
    capitalize_words,
    describe,
    format_price,
    format_price_range,
    has_non_vegetarian_options,
    has_vegetarian_options,
    protein_price,
    resolve_category,
    show_result,
    sorted_proteins,
)
from usecases import CartUsecase, MenuUsecase


def dietary_badges(item: MenuItem) -> str:
    badges = []
    if has_vegetarian_options(item):
        badges.append(":green-background[veg]")
    if has_non_vegetarian_options(item):
        badges.append(":orange-background[non-veg]")
    return " ".join(badges)


def render_add_to_cart(item: MenuItem, cart_usecase: CartUsecase) -> None:
    with st.form(f"add_to_cart_{item.id}", border=False):
        protein = None
        labels = {
            option.protein_options.name: (
                f"{option.protein_options.name} | "
                f"{format_price(protein_price(item, option))}"
            )
            for option in sorted_proteins(item)
        }
        if item.has_protein_options and labels:
            protein = st.selectbox(
                "Protein",
                options=list(labels),
                format_func=labels.get,
                key=f"protein_{item.id}",
            )
        quantity = st.number_input(
            "Quantity", min_value=1, max_value=20, value=1, key=f"quantity_{item.id}"
        )
        if st.form_submit_button("Add to cart"):
            result = cart_usecase.add_item(
                CartItemRequest(
                    menu_item_id=item.id, protein=protein, quantity=int(quantity)
                )
            )
            show_result(result, f"Added {capitalize_words(item.name)} to cart")


def render_menu_item(item: MenuItem, cart_usecase: CartUsecase) -> None:
    with st.container(border=True):
        image_column, details_column = st.columns([1, 2])
        with image_column:
            st.image(item.image_url or PLACEHOLDER_IMAGE, width="stretch")
            if st.button("Open image", key=f"menu_image_{item.id}"):
                show_image_dialog(src=item.image_url or "", alt=item.image_alt_text)
        with details_column:
            st.markdown(f"#### {capitalize_words(item.name)}")
            badges = dietary_badges(item)
            if badges:
                st.markdown(badges)
            st.markdown(f"**{format_price_range(item)}**")
        st.caption(describe(item))
        render_add_to_cart(item, cart_usecase)


def render_menu_tab(menu_usecase: MenuUsecase, cart_usecase: CartUsecase) -> None:
    """Render the menu grouped by category."""
    st.subheader("Menu")
    result = menu_usecase.get_menu_items()
    if not show_result(result):
        return
    if not result.data:
        st.info("The menu is empty")
        return

    categories = sorted({item.category for item in result.data if item.category})
    st.session_state["selected_category"] = resolve_category(
        st.session_state["selected_category"], categories
    )
    if categories:
        st.selectbox(
            "Category",
            options=[None, *categories],
            format_func=lambda category: category or "All",
            key="selected_category",
        )
    selected_category = st.session_state["selected_category"]

    items = [
        item
        for item in result.data
        if selected_category is None or item.category == selected_category
    ]
    columns = st.columns(2)
    for index, item in enumerate(items):
        with columns[index % 2]:
            render_menu_item(item, cart_usecase)
