"""
Session state helpers for Streamlit.
"""

import asyncio
from typing import Optional

import streamlit as st

from movie_explorer.config import CatalogConfig, load_catalog_config
from movie_explorer.core.fetch_executor import FetchExecutor
from movie_explorer.core.state_machine import QueryStateMachine


def create_state_machine(config: CatalogConfig) -> QueryStateMachine:
    """
    Build a state machine that settles each fetch before returning.

    Streamlit reruns the page script on every interaction, so there is no
    long-lived event loop to run fetches on; each one runs to completion
    inside the rerun that issued it.
    """
    machine = QueryStateMachine(
        FetchExecutor(config),
        dispatch=lambda pending: asyncio.run(machine.resolve(pending)),
    )
    return machine


def get_state_machine() -> QueryStateMachine:
    """Get the query state machine from session state."""
    return st.session_state["query_machine"]


def get_catalog_config() -> CatalogConfig:
    """Get the catalog config the session was started with."""
    return st.session_state["catalog_config"]


def init_session_state(config: Optional[CatalogConfig] = None) -> None:
    """Initialize session state keys if not present."""
    if "catalog_config" not in st.session_state:
        st.session_state["catalog_config"] = config or load_catalog_config()
    if "query_machine" not in st.session_state:
        st.session_state["query_machine"] = create_state_machine(st.session_state["catalog_config"])
    machine = st.session_state["query_machine"]
    if "search_text" not in st.session_state:
        st.session_state["search_text"] = machine.intent.search_text
    if "sort_key" not in st.session_state:
        st.session_state["sort_key"] = machine.intent.sort_key.value
