"""
Unit tests for card and pagination display helpers.
"""

import pytest

from movie_explorer.config import PLACEHOLDER_IMAGE
from movie_explorer.ui.formatting import (
    format_rating,
    format_release_date,
    has_next_page,
    has_previous_page,
    page_label,
    poster_url,
)


class TestPosterUrl:

    def test_resolves_against_image_base(self):
        assert poster_url("/abc.jpg", "https://img.test/t/p/w200") == "https://img.test/t/p/w200/abc.jpg"

    def test_default_image_base(self):
        assert poster_url("/abc.jpg") == "https://image.tmdb.org/t/p/w200/abc.jpg"

    @pytest.mark.parametrize("path", [None, ""])
    def test_placeholder_when_missing(self, path):
        assert poster_url(path) == PLACEHOLDER_IMAGE


class TestCardText:

    def test_release_date(self):
        assert format_release_date("2010-07-16") == "2010-07-16"
        assert format_release_date(None) == "N/A"

    @pytest.mark.parametrize(
        "vote, expected",
        [(7.25, "7.3"), (6.75, "6.8"), (7.24, "7.2"), (8.0, "8.0"), (0.0, "0.0"), (10.0, "10.0"), (None, "N/A")],
    )
    def test_rating(self, vote, expected):
        assert format_rating(vote) == expected


class TestPaginationText:

    def test_label(self):
        assert page_label(2, 5) == "Page 2 of 5"

    def test_first_page(self):
        assert not has_previous_page(1)
        assert has_next_page(1, 5)

    def test_last_page(self):
        assert has_previous_page(5)
        assert not has_next_page(5, 5)

    def test_single_page(self):
        assert not has_previous_page(1)
        assert not has_next_page(1, 1)
