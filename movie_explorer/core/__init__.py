"""
Core query logic: intent-to-query mapping, catalog fetches and the
state machine that reconciles them.
"""

from movie_explorer.core.errors import FetchError, HttpError, NetworkError, ParseError
from movie_explorer.core.fetch_executor import FetchExecutor
from movie_explorer.core.query_builder import build
from movie_explorer.core.state_machine import FAILURE_MESSAGE, PendingFetch, QueryStateMachine

__all__ = [
    "FetchError",
    "HttpError",
    "NetworkError",
    "ParseError",
    "FetchExecutor",
    "build",
    "FAILURE_MESSAGE",
    "PendingFetch",
    "QueryStateMachine",
]
