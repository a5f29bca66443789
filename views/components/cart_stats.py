"""
Shopping list progress component.
"""

import streamlit as st


def render_cart_stats(to_buy: int, bought: int, total: int):
    """
    Render how far along the shopping trip is.

    Args:
        to_buy: Units still to buy
        bought: Units already bought
        total: Units on the whole list
    """
    col_total, col_progress = st.columns([1, 3])

    with col_total:
        st.metric("On the list", total, delta=f"{to_buy} to buy", delta_color="off")

    with col_progress:
        if total > 0 and to_buy == 0:
            st.success("Everything is bought")
        else:
            st.caption(f"{bought} of {total} bought")
        st.progress(bought / total if total > 0 else 0)
