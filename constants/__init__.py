from constants.testimonials import TESTIMONIALS
from constants.ui import (
    FAVORITES_PER_PAGE,
    MAX_RATING,
    NO_DESCRIPTION,
    PLACEHOLDER_IMAGE,
    TESTIMONIALS_PER_PAGE,
)

__all__ = [
    "FAVORITES_PER_PAGE",
    "MAX_RATING",
    "NO_DESCRIPTION",
    "PLACEHOLDER_IMAGE",
    "TESTIMONIALS",
    "TESTIMONIALS_PER_PAGE",
]
