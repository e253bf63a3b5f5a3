"""
View states published by the query state machine.

Presentation reads these and never mutates them.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from movie_explorer.models.movie import MovieSummary, RemotePage
from movie_explorer.models.query import Intent, RequestToken


class IdleState(BaseModel):
    """Nothing requested yet."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"

    @property
    def items(self) -> list[MovieSummary]:
        return []


class LoadingState(BaseModel):
    """A fetch for `intent` is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    intent: Intent
    token: RequestToken

    @property
    def items(self) -> list[MovieSummary]:
        return []


class ReadyState(BaseModel):
    """The page for `intent` arrived."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ready"] = "ready"
    intent: Intent
    token: RequestToken
    page: RemotePage

    @property
    def items(self) -> list[MovieSummary]:
        return self.page.items

    @property
    def current_page(self) -> int:
        return self.page.page

    @property
    def total_pages(self) -> int:
        return self.page.total_pages


class FailedState(BaseModel):
    """The fetch for `intent` failed; `message` is shown to the user."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    intent: Intent
    token: RequestToken
    message: str

    @property
    def items(self) -> list[MovieSummary]:
        return []


ViewState = Union[IdleState, LoadingState, ReadyState, FailedState]
