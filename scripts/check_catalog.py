#!/usr/bin/env python
"""
Run one catalog query through the state machine and print the result.

Reads connection settings from the environment (TMDB_API_KEY,
TMDB_ACCESS_TOKEN, TMDB_BASE_URL, TMDB_TIMEOUT).

Usage:
    # Popular movies, first page
    python scripts/check_catalog.py

    # Search
    python scripts/check_catalog.py --search "batman" --page 2

    # Discovery sorted by rating
    python scripts/check_catalog.py --sort vote_average.desc
"""

import sys
import asyncio
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from movie_explorer.config import load_catalog_config
from movie_explorer.core.fetch_executor import FetchExecutor
from movie_explorer.core.state_machine import QueryStateMachine
from movie_explorer.models.query import SortKey
from movie_explorer.models.view_state import FailedState, ReadyState
from movie_explorer.ui.formatting import format_rating, format_release_date, page_label
from movie_explorer.utils.logging_config import configure_script_logging


async def run_query(search: str, sort: str, page: int) -> int:
    """Drive the state machine to the requested page; return an exit code."""
    machine = QueryStateMachine(FetchExecutor(load_catalog_config()), initial_sort=sort)
    if search:
        machine.set_search_text(search)
    else:
        machine.start()
    await machine.wait_idle()

    if page > 1:
        if machine.set_page(page) is None:
            print(f"[ERROR] Page {page} is out of range (1..{machine.total_pages})")
            return 1
        await machine.wait_idle()

    state = machine.view_state
    if isinstance(state, FailedState):
        print(f"[ERROR] {state.message}")
        return 1
    if not isinstance(state, ReadyState):
        print(f"[ERROR] Unexpected state: {state.status}")
        return 1

    print(f"\n{'='*60}")
    print(page_label(state.current_page, state.total_pages))
    print('='*60)
    if not state.items:
        print("No movies found.")
    for movie in state.items:
        print(
            f"  {movie.title:<40} "
            f"{format_release_date(movie.release_date):<12} "
            f"{format_rating(movie.vote_average):>4}"
        )
    return 0


def main():
    parser = argparse.ArgumentParser(description="Query the movie catalog")
    parser.add_argument('--search', default="", help="Search text (blank for discovery)")
    parser.add_argument(
        '--sort',
        default=SortKey.POPULARITY_DESC.value,
        choices=[key.value for key in SortKey],
        help="Discovery sort order",
    )
    parser.add_argument('--page', type=int, default=1)
    parser.add_argument('--debug', action='store_true', help="Enable debug logging")
    args = parser.parse_args()

    configure_script_logging(debug=args.debug)
    try:
        return asyncio.run(run_query(args.search, args.sort, args.page))
    except KeyboardInterrupt:
        print("\n[WARNING] Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
