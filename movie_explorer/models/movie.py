"""
Pydantic schemas for catalog results.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MovieSummary(BaseModel):
    """One movie as listed by discover or search."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    vote_average: Optional[float] = Field(default=None, ge=0, le=10)

    @field_validator("release_date", "poster_path")
    @classmethod
    def blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
        # The catalog sends "" for unknown release dates
        return value or None


class RemotePage(BaseModel):
    """One page of results."""

    model_config = ConfigDict(frozen=True)

    items: list[MovieSummary] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 1


class CatalogEnvelope(BaseModel):
    """Raw JSON envelope returned by both catalog endpoints."""

    page: Optional[int] = None
    total_pages: Optional[int] = None
    results: Optional[list[MovieSummary]] = None

    def to_page(self, requested_page: int) -> RemotePage:
        return RemotePage(
            items=self.results or [],
            page=self.page if self.page is not None else requested_page,
            total_pages=self.total_pages if self.total_pages is not None else 1,
        )
