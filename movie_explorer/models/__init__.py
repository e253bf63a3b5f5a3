"""
Pydantic schemas for intents, queries, results and view states.
"""

from movie_explorer.models.query import (
    Endpoint,
    Intent,
    QueryDescriptor,
    RequestToken,
    SortKey,
)
from movie_explorer.models.movie import CatalogEnvelope, MovieSummary, RemotePage
from movie_explorer.models.view_state import (
    FailedState,
    IdleState,
    LoadingState,
    ReadyState,
    ViewState,
)

__all__ = [
    "Endpoint",
    "Intent",
    "QueryDescriptor",
    "RequestToken",
    "SortKey",
    "CatalogEnvelope",
    "MovieSummary",
    "RemotePage",
    "FailedState",
    "IdleState",
    "LoadingState",
    "ReadyState",
    "ViewState",
]
