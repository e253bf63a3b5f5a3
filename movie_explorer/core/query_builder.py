"""
Maps user intent to the catalog query that serves it.
"""

from movie_explorer.models.query import Endpoint, Intent, QueryDescriptor


def build(intent: Intent) -> QueryDescriptor:
    """
    Resolve an intent into a query descriptor.

    Non-blank search text selects the search endpoint and ignores the sort
    key; otherwise the discover endpoint is sorted by the intent's key.

    Args:
        intent: Current user intent

    Returns:
        QueryDescriptor for intent.page
    """
    text = intent.effective_search
    if text:
        return QueryDescriptor(
            endpoint=Endpoint.SEARCH,
            params={"query": text},
            page=intent.page,
        )
    return QueryDescriptor(
        endpoint=Endpoint.DISCOVER,
        params={"sort_by": intent.sort_key.value},
        page=intent.page,
    )
