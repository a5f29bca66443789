"""
Catalog product components.

Provides the product card shown in the catalog grid and the detail
panel with a quantity editor.
"""

import streamlit as st
from typing import Callable

from models import ItemStatus, Product


def render_product_card(
    product: Product,
    quantity: int,
    on_add: Callable[[Product], None],
    on_open: Callable[[Product], None],
):
    """
    Render a single product card.

    Args:
        product: Catalog product
        quantity: Count of this product on the list (0 if absent)
        on_add: Callback to add one unit
        on_open: Callback to open the detail panel
    """
    with st.container(border=True):
        icon_col, badge_col = st.columns([3, 1])
        with icon_col:
            st.markdown(f"## {product.icon}")
        with badge_col:
            if quantity > 0:
                st.markdown(f"**{quantity}**")

        st.markdown(f"**{product.name}**")
        st.caption(product.description)

        col_add, col_open = st.columns(2)
        with col_add:
            if st.button("+ Add", key=f"add_{product.id}", use_container_width=True):
                on_add(product)
                st.rerun()
        with col_open:
            if st.button("Details", key=f"open_{product.id}", use_container_width=True):
                on_open(product)
                st.rerun()


def render_product_row(
    products: list[Product],
    get_quantity: Callable[[Product], int],
    on_add: Callable[[Product], None],
    on_open: Callable[[Product], None],
    per_row: int = 4,
):
    """Render products as rows of cards."""
    for start in range(0, len(products), per_row):
        chunk = products[start:start + per_row]
        columns = st.columns(per_row)
        for column, product in zip(columns, chunk):
            with column:
                render_product_card(product, get_quantity(product), on_add, on_open)


def render_product_detail(
    product: Product,
    quantity: int,
    status: ItemStatus,
    on_save: Callable[[Product, int], None],
    on_close: Callable[[], None],
):
    """
    Render the product detail panel.

    Args:
        product: Product to show
        quantity: Current count on the list, used as the editor's start value
        status: Whether the product is pending, purchased or absent
        on_save: Callback with the chosen quantity
        on_close: Callback to close the panel
    """
    with st.container(border=True):
        st.markdown(f"# {product.icon}")
        st.markdown(f"### {product.name}")
        st.caption(product.category)

        st.markdown("**Description**")
        st.write(product.description)

        new_quantity = st.number_input(
            "Quantity",
            min_value=0,
            value=quantity if quantity > 0 else 1,
            step=1,
            key=f"detail_qty_{product.id}_{quantity}",
        )

        if status == ItemStatus.PENDING:
            st.success(f"On the list: {quantity}")
        elif status == ItemStatus.PURCHASED:
            st.success(f"Bought: {quantity}")

        col_save, col_close = st.columns(2)
        with col_save:
            if st.button("Add to list", key=f"save_{product.id}", type="primary",
                         use_container_width=True):
                on_save(product, int(new_quantity))
                on_close()
                st.rerun()
        with col_close:
            if st.button("Close", key=f"close_{product.id}", use_container_width=True):
                on_close()
                st.rerun()
