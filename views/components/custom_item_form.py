"""
Custom item form - lets the user add a product that is not in the catalog.
"""

import streamlit as st
from typing import Any, Callable, Optional


def render_custom_item_form(
    form_key: str,
    validate_name: Callable[[str], tuple[bool, str]],
    on_submit: Callable[[str, int], Optional[Any]],
    on_cancel: Callable[[], None],
):
    """
    Render the add-your-own-item form.

    Args:
        form_key: Unique Streamlit key for the form
        validate_name: Returns (is_valid, message) for a typed name
        on_submit: Callback with name and quantity
        on_cancel: Callback to close the form
    """
    with st.form(form_key, clear_on_submit=True):
        st.markdown("#### Add your own item")
        name = st.text_input("Product name", placeholder="Enter a name")
        quantity = st.number_input("Quantity", min_value=1, value=1, step=1)

        col_add, col_cancel = st.columns(2)
        with col_add:
            submitted = st.form_submit_button("Add to list", type="primary",
                                              use_container_width=True)
        with col_cancel:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        on_cancel()
        st.rerun()

    if submitted:
        is_valid, message = validate_name(name)
        if not is_valid:
            st.warning(message)
            return
        on_submit(name, int(quantity))
        st.rerun()
