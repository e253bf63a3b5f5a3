"""
Query/result state machine.

Holds the user's intent, issues one fetch per intent change and applies a
response only when its token is still the current one. Responses for
superseded requests are dropped on arrival, whatever order they come back
in, so the published view state always matches the latest intent.

Intent-changing operations are synchronous: intent and token are updated
before the fetch is handed to the dispatcher. The default dispatcher runs
each fetch as an asyncio task on the running loop; headless callers pass
their own dispatcher and settle fetches through on_response().
"""

import asyncio
import itertools
import logging
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict

from movie_explorer.core.errors import FetchError
from movie_explorer.core.fetch_executor import FetchExecutor
from movie_explorer.core.query_builder import build
from movie_explorer.models.movie import RemotePage
from movie_explorer.models.query import Intent, QueryDescriptor, RequestToken, SortKey
from movie_explorer.models.view_state import (
    FailedState,
    IdleState,
    LoadingState,
    ReadyState,
    ViewState,
)

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to fetch movies."


class PendingFetch(BaseModel):
    """A fetch issued for `token`, waiting to be executed."""

    model_config = ConfigDict(frozen=True)

    token: RequestToken
    descriptor: QueryDescriptor


Listener = Callable[[ViewState], None]
Dispatcher = Callable[[PendingFetch], None]
FetchResult = Union[RemotePage, FetchError]


class QueryStateMachine:
    """
    Owns intent, the current request token and the view state.

    Usage:
        machine = QueryStateMachine(FetchExecutor(config))
        machine.subscribe(render)
        machine.start()
        machine.set_search_text("batman")
        await machine.wait_idle()
    """

    def __init__(
        self,
        executor: Optional[FetchExecutor] = None,
        *,
        initial_sort: Union[SortKey, str] = SortKey.POPULARITY_DESC,
        dispatch: Optional[Dispatcher] = None,
    ):
        """
        Initialize the state machine in the idle state.

        Args:
            executor: Executor used by resolve(); may be omitted when a
                custom dispatcher settles fetches itself
            initial_sort: Sort key for the initial discovery listing
            dispatch: Callable receiving each PendingFetch. Defaults to
                scheduling resolve() as a task on the running event loop;
                operations then raise RuntimeError when called outside one.
        """
        if executor is None and dispatch is None:
            raise ValueError("An executor is required when no dispatcher is given")

        self.executor = executor
        self._dispatch = dispatch or self._schedule
        self._needs_running_loop = dispatch is None

        self._intent = Intent(sort_key=SortKey(initial_sort))
        self._view_state: ViewState = IdleState()
        self._token: Optional[RequestToken] = None
        self._token_counter = itertools.count(1)
        self._total_pages = 1

        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task] = set()

    # Read side

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def intent(self) -> Intent:
        return self._intent

    @property
    def current_token(self) -> Optional[RequestToken]:
        return self._token

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def is_searching(self) -> bool:
        return self._intent.is_search

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a view-state listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Intent operations

    def start(self) -> Optional[RequestToken]:
        """Issue the initial discovery query. No-op once anything was requested."""
        if not isinstance(self._view_state, IdleState):
            logger.debug("start() ignored, state is %s", self._view_state.status)
            return None
        return self._issue(self._intent)

    def reload(self) -> Optional[RequestToken]:
        """Re-issue the current intent under a new token (user retry)."""
        return self._issue(self._intent)

    def set_search_text(self, text: str) -> Optional[RequestToken]:
        """
        Search for `text`, or return to discovery when it is blank.

        Returns:
            Token of the issued fetch, or None when the query is unchanged
        """
        intent = self._intent.model_copy(update={"search_text": text, "page": 1})
        if self._is_in_effect(intent):
            self._intent = intent
            return None
        return self._issue(intent, query_changed=True)

    def set_sort_key(self, key: Union[SortKey, str]) -> Optional[RequestToken]:
        """
        Change the discovery sort order.

        While a search is active the key is only stored and is applied once
        the search text is cleared.

        Returns:
            Token of the issued fetch, or None when nothing was fetched
        """
        key = SortKey(key)
        if key == self._intent.sort_key:
            return None

        if self._intent.is_search:
            logger.debug("Sort key %s stored until search is cleared", key.value)
            self._intent = self._intent.model_copy(update={"sort_key": key})
            return None

        intent = self._intent.model_copy(update={"sort_key": key, "page": 1})
        return self._issue(intent, query_changed=True)

    def set_page(self, page: int) -> Optional[RequestToken]:
        """
        Move to `page` of the current query.

        Pages outside 1..total_pages are ignored; a pagination control
        rendered for an older result set may still send them.
        """
        if not 1 <= page <= self._total_pages:
            logger.debug("Ignoring page %s outside 1..%d", page, self._total_pages)
            return None
        return self._issue(self._intent.model_copy(update={"page": page}))

    # Response side

    def on_response(self, token: RequestToken, result: FetchResult) -> None:
        """
        Apply a settled fetch if it belongs to the current request.

        Args:
            token: Token the fetch was issued under
            result: RemotePage on success, FetchError on failure
        """
        if token != self._token:
            logger.debug("Discarding stale response for token %s (current %s)", token, self._token)
            return

        intent = self._intent

        if isinstance(result, FetchError):
            logger.error(
                "Fetch for token %s failed with %s: %s",
                token,
                type(result).__name__,
                result,
            )
            self._set_view_state(FailedState(intent=intent, token=token, message=FAILURE_MESSAGE))
            return

        page = result
        if page.total_pages < 1:
            page = page.model_copy(update={"total_pages": 1})
        self._total_pages = page.total_pages

        if page.page >= 1 and page.page != intent.page:
            intent = intent.model_copy(update={"page": page.page})
            self._intent = intent

        logger.info(
            "Loaded %d movies (page %d of %d, token %s)",
            len(page.items),
            page.page,
            page.total_pages,
            token,
        )
        self._set_view_state(ReadyState(intent=intent, token=token, page=page))

    async def resolve(self, pending: PendingFetch) -> None:
        """Execute a pending fetch and route its outcome to on_response()."""
        if self.executor is None:
            raise RuntimeError("resolve() needs an executor")

        try:
            result: FetchResult = await self.executor.execute(pending.descriptor)
        except FetchError as e:
            result = e
        self.on_response(pending.token, result)

    async def wait_idle(self) -> None:
        """Wait until every fetch scheduled by the default dispatcher settles."""
        while True:
            running = [task for task in self._tasks if not task.done()]
            if not running:
                return
            await asyncio.gather(*running)

    # Internals

    def _is_in_effect(self, intent: Intent) -> bool:
        if isinstance(self._view_state, IdleState):
            return False
        return build(intent) == build(self._intent)

    def _issue(self, intent: Intent, query_changed: bool = False) -> RequestToken:
        if self._needs_running_loop:
            # Fail before touching state so the machine is not left in Loading
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                raise RuntimeError(
                    "The default dispatcher needs a running event loop; "
                    "pass dispatch= to drive fetches without one"
                ) from None

        self._intent = intent
        if query_changed:
            # Page count of the previous query no longer applies
            self._total_pages = 1

        token = RequestToken(next(self._token_counter))
        self._token = token
        descriptor = build(intent)

        logger.info(
            "Requesting %s %s page %d (token %s)",
            descriptor.endpoint.value,
            descriptor.params,
            descriptor.page,
            token,
        )
        self._set_view_state(LoadingState(intent=intent, token=token))
        self._dispatch(PendingFetch(token=token, descriptor=descriptor))
        return token

    def _schedule(self, pending: PendingFetch) -> None:
        task = asyncio.get_running_loop().create_task(self.resolve(pending))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _set_view_state(self, state: ViewState) -> None:
        self._view_state = state
        for listener in list(self._listeners):
            listener(state)
