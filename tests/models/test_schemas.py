"""
Unit tests for the pydantic schemas.
"""

import pytest
from pydantic import ValidationError

from movie_explorer.models.movie import CatalogEnvelope, MovieSummary
from movie_explorer.models.query import Intent, SortKey


class TestIntent:

    def test_defaults(self):
        intent = Intent()
        assert intent.search_text == ""
        assert intent.sort_key == SortKey.POPULARITY_DESC
        assert intent.page == 1
        assert not intent.is_search

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            Intent(page=0)

    def test_intent_is_frozen(self):
        intent = Intent()
        with pytest.raises(ValidationError):
            intent.page = 2

    def test_effective_search(self):
        assert Intent(search_text="  heat ").effective_search == "heat"
        assert not Intent(search_text=" \t").is_search


class TestSortKey:

    def test_labels(self):
        assert [key.label for key in SortKey] == [
            "Popularity (Desc)",
            "Release Date (Asc)",
            "Release Date (Desc)",
            "Rating (Asc)",
            "Rating (Desc)",
        ]

    def test_lookup_by_wire_value(self):
        assert SortKey("vote_average.desc") is SortKey.RATING_DESC


class TestMovieSummary:

    def test_blank_release_date_is_missing(self):
        movie = MovieSummary(id=1, title="A", release_date="", poster_path=None)
        assert movie.release_date is None

    @pytest.mark.parametrize("vote", [-0.1, 10.5])
    def test_vote_average_range(self, vote):
        with pytest.raises(ValidationError):
            MovieSummary(id=1, title="A", vote_average=vote)

    def test_extra_fields_ignored(self):
        movie = MovieSummary.model_validate({"id": 7, "title": "Seven", "adult": False})
        assert movie.id == 7


class TestCatalogEnvelope:

    def test_to_page(self):
        envelope = CatalogEnvelope.model_validate(
            {"page": 2, "total_pages": 9, "results": [{"id": 1, "title": "A"}]}
        )
        page = envelope.to_page(requested_page=2)

        assert page.page == 2
        assert page.total_pages == 9
        assert len(page.items) == 1

    def test_null_results(self):
        page = CatalogEnvelope.model_validate({"page": 1, "total_pages": 1, "results": None}).to_page(1)
        assert page.items == []
