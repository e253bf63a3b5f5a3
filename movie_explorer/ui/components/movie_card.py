"""
Movie display card component.
"""

import streamlit as st

from movie_explorer.models.movie import MovieSummary
from movie_explorer.ui.formatting import format_rating, format_release_date, poster_url


def render_movie_card(movie: MovieSummary, image_base_url: str) -> None:
    """
    Render a single movie card.

    Args:
        movie: Movie to display
        image_base_url: Base URL poster paths are resolved against
    """
    with st.container(border=True):
        st.image(poster_url(movie.poster_path, image_base_url), width=200)
        st.markdown(f"**{movie.title}**")
        st.caption(f"Release Date: {format_release_date(movie.release_date)}")
        st.caption(f"Rating: {format_rating(movie.vote_average)}")


def render_movie_grid(
    movies: list[MovieSummary],
    image_base_url: str,
    columns_per_row: int = 5,
) -> None:
    """Render movies as rows of cards."""
    for start in range(0, len(movies), columns_per_row):
        row = movies[start:start + columns_per_row]
        for column, movie in zip(st.columns(columns_per_row), row):
            with column:
                render_movie_card(movie, image_base_url)
