"""
Streamlit page for browsing and searching the movie catalog.

Run: streamlit run movie_explorer/ui/app.py --server.port 8501
"""

import streamlit as st

from movie_explorer.config import get_log_level
from movie_explorer.models.query import SortKey
from movie_explorer.models.view_state import FailedState, ReadyState
from movie_explorer.ui.components.movie_card import render_movie_grid
from movie_explorer.ui.components.pagination import render_pagination
from movie_explorer.ui.utils.session_state import (
    get_catalog_config,
    get_state_machine,
    init_session_state,
)
from movie_explorer.utils.logging_config import configure_ui_logging

st.set_page_config(
    page_title="Movie Explorer",
    page_icon="🎬",
    layout="wide",
)



@st.cache_resource
def init_logging(level: str) -> None:
    """Configure logging once per server process and log level, not per rerun."""
    configure_ui_logging(level=level)


init_logging(get_log_level())
init_session_state()

machine = get_state_machine()
machine.start()


def handle_search_change() -> None:
    """Callback when the search box changes."""
    machine.set_search_text(st.session_state["search_text"])


def handle_sort_change() -> None:
    """Callback when a sort option is selected."""
    machine.set_sort_key(st.session_state["sort_key"])


st.title("🎬 Movie Explorer")

col1, col2 = st.columns([3, 1])
with col1:
    st.text_input(
        "Search",
        key="search_text",
        placeholder="Search for a movie ...",
        on_change=handle_search_change,
        label_visibility="collapsed",
    )
with col2:
    st.selectbox(
        "Sort",
        options=[key.value for key in SortKey],
        format_func=lambda value: SortKey(value).label,
        key="sort_key",
        on_change=handle_sort_change,
        disabled=machine.is_searching,
        label_visibility="collapsed",
    )

st.divider()

state = machine.view_state
if isinstance(state, FailedState):
    st.error(f"Error: {state.message}")
    st.button("Reload", on_click=machine.reload)
elif not isinstance(state, ReadyState):
    st.info("Loading movies...")
elif not state.items:
    st.info("No movies found.")
else:
    render_movie_grid(state.items, get_catalog_config().image_base_url)
    render_pagination(state.current_page, state.total_pages, machine.set_page)
