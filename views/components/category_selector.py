"""
Category filter component.
"""

import streamlit as st
from typing import Callable, Optional

ALL_CATEGORIES_LABEL = "All"


def render_category_selector(
    categories: list[str],
    selected: Optional[str],
    on_select: Callable[[Optional[str]], None],
):
    """
    Render the category chips.

    Args:
        categories: Sorted category labels
        selected: Currently selected category, None for all
        on_select: Callback with the new category (None for all)
    """
    options = [ALL_CATEGORIES_LABEL] + categories
    current = selected if selected in categories else ALL_CATEGORIES_LABEL

    choice = st.radio(
        "Category",
        options,
        index=options.index(current),
        horizontal=True,
        label_visibility="collapsed",
        key="category_selector",
    )

    new_selection = None if choice == ALL_CATEGORIES_LABEL else choice
    if new_selection != selected:
        on_select(new_selection)
        st.rerun()
