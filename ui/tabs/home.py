import streamlit as st

from constants import (
    FAVORITES_PER_PAGE,
    PLACEHOLDER_IMAGE,
    TESTIMONIALS,
    TESTIMONIALS_PER_PAGE,
)
from schemas import FavoriteMenuItem, Testimonial
from ui.state import step_page
from ui.utils import capitalize_words, carousel_page, render_stars, show_result
from usecases import MenuUsecase


@st.dialog("Preview", width="large")
def show_image_dialog(src: str, alt: str) -> None:
    st.image(src or PLACEHOLDER_IMAGE, caption=alt or None, width="stretch")


def render_carousel_controls(key: str) -> None:
    previous_column, _, next_column = st.columns([1, 8, 1])
    previous_column.button(
        "‹", key=f"{key}_previous", on_click=step_page, args=(key, -1)
    )
    next_column.button("›", key=f"{key}_next", on_click=step_page, args=(key, 1))


def render_favorite_card(item: FavoriteMenuItem) -> None:
    with st.container(border=True):
        st.image(item.image_url or PLACEHOLDER_IMAGE, width="stretch")
        if st.button("Open image", key=f"favorite_image_{item.id}"):
            show_image_dialog(src=item.image_url, alt=item.image_alt_text)
        st.markdown(f"**{capitalize_words(item.name)}**")
        if item.short_description:
            st.caption(item.short_description)


def render_favorites(menu_usecase: MenuUsecase) -> None:
    """Render the favorites carousel."""
    st.subheader("Our Favorites")
    result = menu_usecase.get_favorite_items()
    if not show_result(result):
        return
    if not result.data:
        st.info("No favorites yet")
        return

    visible = carousel_page(
        result.data, st.session_state["favorites_page"], FAVORITES_PER_PAGE
    )
    for column, item in zip(st.columns(FAVORITES_PER_PAGE), visible):
        with column:
            render_favorite_card(item)
    render_carousel_controls("favorites_page")


def render_testimonial(testimonial: Testimonial) -> None:
    with st.container(border=True):
        st.markdown(f"*{testimonial.quote}*")
        if testimonial.image:
            st.image(testimonial.image, width=48)
        st.markdown(f"**{testimonial.name}**  \n{render_stars(testimonial.rating)}")


def render_testimonials() -> None:
    st.subheader("What Our Clients Say")
    visible = carousel_page(
        TESTIMONIALS, st.session_state["testimonials_page"], TESTIMONIALS_PER_PAGE
    )
    for column, testimonial in zip(st.columns(TESTIMONIALS_PER_PAGE), visible):
        with column:
            render_testimonial(testimonial)
    render_carousel_controls("testimonials_page")


def render_home_tab(menu_usecase: MenuUsecase) -> None:
    render_favorites(menu_usecase)
    render_testimonials()
