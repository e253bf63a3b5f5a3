"""
Display helpers shared by the card and pagination components.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from movie_explorer.config import DEFAULT_IMAGE_BASE_URL, PLACEHOLDER_IMAGE

NOT_AVAILABLE = "N/A"


def poster_url(poster_path: Optional[str], image_base_url: str = DEFAULT_IMAGE_BASE_URL) -> str:
    """Full poster URL, or the placeholder image when the movie has none."""
    if not poster_path:
        return PLACEHOLDER_IMAGE
    return f"{image_base_url.rstrip('/')}{poster_path}"


def format_release_date(release_date: Optional[str]) -> str:
    return release_date or NOT_AVAILABLE


def format_rating(vote_average: Optional[float]) -> str:
    """One decimal place, halves rounded up (7.25 -> '7.3'); missing -> 'N/A'."""
    if vote_average is None:
        return NOT_AVAILABLE
    # Rounds the exact binary value of the float, ties away from zero
    return str(Decimal(vote_average).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def page_label(current_page: int, total_pages: int) -> str:
    return f"Page {current_page} of {total_pages}"


def has_previous_page(current_page: int) -> bool:
    return current_page > 1


def has_next_page(current_page: int, total_pages: int) -> bool:
    return current_page < total_pages
