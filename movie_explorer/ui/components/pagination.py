"""
Previous / Next pagination control.
"""

from typing import Callable

import streamlit as st

from movie_explorer.ui.formatting import has_next_page, has_previous_page, page_label


def render_pagination(
    current_page: int,
    total_pages: int,
    on_page_change: Callable[[int], object],
) -> None:
    """
    Render pagination buttons around a "Page X of Y" label.

    Args:
        current_page: Page currently displayed
        total_pages: Total pages of the current query
        on_page_change: Callback(page) when a button is clicked
    """
    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        st.button(
            "Previous",
            key="prev_btn",
            disabled=not has_previous_page(current_page),
            on_click=on_page_change,
            args=(current_page - 1,),
            use_container_width=True,
        )
    with col2:
        st.markdown(
            f"<p style='text-align: center'>{page_label(current_page, total_pages)}</p>",
            unsafe_allow_html=True,
        )
    with col3:
        st.button(
            "Next",
            key="next_btn",
            disabled=not has_next_page(current_page, total_pages),
            on_click=on_page_change,
            args=(current_page + 1,),
            use_container_width=True,
        )
