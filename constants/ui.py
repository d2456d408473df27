FAVORITES_PER_PAGE = 3
TESTIMONIALS_PER_PAGE = 2
MAX_RATING = 5
PLACEHOLDER_IMAGE = "https://placehold.co/400x400?text=No+image"
NO_DESCRIPTION = "No description available"
