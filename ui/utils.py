import math
from typing import Sequence, TypeVar

import streamlit as st

from constants import MAX_RATING, NO_DESCRIPTION
from enums import StarFill
from schemas import ActionResult, MenuItem, MenuItemProtein

T = TypeVar("T")


def show_result(result: ActionResult, success_message: str | None = None) -> bool:
    """Render an action result as a success notice or an error.

    Args:
        result: Action result returned by a usecase.
        success_message: Optional message shown when the call succeeds.

    Returns:
        True when the result is a success.

    """
    if result.success:
        if success_message:
            st.success(success_message)
        return True

    if result.status:
        st.error(f"HTTP {result.status}: {result.error}")
    else:
        st.error(result.error)
    return False


def capitalize_words(text: str) -> str:
    """Title-case each word, e.g. `CHICKEN tikka` -> `Chicken Tikka`."""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def describe(item: MenuItem) -> str:
    if not item.short_description:
        return NO_DESCRIPTION
    return capitalize_first_letter(item.short_description)


def has_vegetarian_options(item: MenuItem) -> bool:
    return item.has_protein_options and any(
        protein.protein_options.is_vegetarian for protein in item.menu_item_proteins
    )


def has_non_vegetarian_options(item: MenuItem) -> bool:
    return item.has_protein_options and any(
        not protein.protein_options.is_vegetarian
        for protein in item.menu_item_proteins
    )


def protein_price(item: MenuItem, protein: MenuItemProtein) -> float:
    return item.base_price + protein.protein_options.price_addition


def sorted_proteins(item: MenuItem) -> list[MenuItemProtein]:
    """Return protein options ordered from cheapest to most expensive."""
    return sorted(
        item.menu_item_proteins, key=lambda protein: protein_price(item, protein)
    )


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_price_range(item: MenuItem) -> str:
    """Format the item price, as a range when several proteins are offered."""
    if len(item.menu_item_proteins) > 1:
        return f"{format_price(item.base_price)} - {format_price(item.max_price)}"
    return format_price(item.base_price)


def star_rating(rating: float) -> list[StarFill]:
    """Map a rating to star fills.

    Stars up to the whole part are full; a half star is only drawn when the
    rating ends in exactly .5.
    """
    stars = []
    for star in range(1, MAX_RATING + 1):
        if star <= math.floor(rating):
            stars.append(StarFill.FULL)
        elif star - 0.5 == rating:
            stars.append(StarFill.HALF)
        else:
            stars.append(StarFill.EMPTY)
    return stars


def render_stars(rating: float) -> str:
    symbols = {StarFill.FULL: "★", StarFill.HALF: "⯪", StarFill.EMPTY: "☆"}
    return "".join(symbols[fill] for fill in star_rating(rating))


def page_count(total: int, per_page: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / per_page)


def carousel_page(items: Sequence[T], page: int, per_page: int) -> list[T]:
    """Return the items visible on a looping carousel page.

    Page indexes wrap around in both directions, so stepping past the last
    page shows the first one again.

    Args:
        items: All carousel items.
        page: Requested page index, may be negative or out of range.
        per_page: Items per page.

    Returns:
        The items of the wrapped page.

    """
    pages = page_count(total=len(items), per_page=per_page)
    if not pages:
        return []

    start = (page % pages) * per_page
    return list(items[start : start + per_page])


def resolve_category(selected: str | None, categories: Sequence[str]) -> str | None:
    """Keep a remembered category only while the menu still offers it."""
    if selected in categories:
        return selected
    return None
