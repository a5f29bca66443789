"""
Cart sidebar component.
"""

import streamlit as st

CART_PAGE = "pages/1_🛒_Shopping_List.py"


def render_cart_sidebar(total_count: int):
    """
    Render the sidebar cart badge with a button to the list.

    Args:
        total_count: Total units on the list, pending and bought
    """
    with st.sidebar:
        st.markdown("### Your List")
        st.markdown("---")
        st.metric("Items on the list", total_count)
        if st.button("Open shopping list →", type="primary", use_container_width=True):
            st.switch_page(CART_PAGE)
