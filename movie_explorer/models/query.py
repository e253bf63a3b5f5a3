"""
Query-side schemas: user intent and the remote query it resolves to.
"""

from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

# Monotonic per-machine counter value; only compared for equality.
RequestToken = NewType("RequestToken", int)


class SortKey(str, Enum):
    """Discovery sort orders, valued by the catalog's sort_by strings."""

    POPULARITY_DESC = "popularity.desc"
    RELEASE_DATE_ASC = "release_date.asc"
    RELEASE_DATE_DESC = "release_date.desc"
    RATING_ASC = "vote_average.asc"
    RATING_DESC = "vote_average.desc"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS = {
    SortKey.POPULARITY_DESC: "Popularity (Desc)",
    SortKey.RELEASE_DATE_ASC: "Release Date (Asc)",
    SortKey.RELEASE_DATE_DESC: "Release Date (Desc)",
    SortKey.RATING_ASC: "Rating (Asc)",
    SortKey.RATING_DESC: "Rating (Desc)",
}


class Endpoint(str, Enum):
    """Catalog read endpoints, valued by their path under the base URL."""

    SEARCH = "search/movie"
    DISCOVER = "discover/movie"


class Intent(BaseModel):
    """What the user currently asked for."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    sort_key: SortKey = SortKey.POPULARITY_DESC
    page: int = Field(default=1, ge=1)

    @property
    def effective_search(self) -> str:
        """Search text as queried; whitespace-only means no search."""
        return self.search_text.strip()

    @property
    def is_search(self) -> bool:
        return bool(self.effective_search)


class QueryDescriptor(BaseModel):
    """A fully resolved catalog query for one page."""

    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint
    params: dict[str, str]
    page: int = Field(ge=1)

    def wire_params(self) -> dict[str, str]:
        """Query-string parameters, unescaped; the HTTP client encodes them."""
        return {**self.params, "page": str(self.page)}
