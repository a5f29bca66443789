"""
Shopping list item components.

Provides the row for an item to buy or already bought, and the inline
quantity editor.
"""

import streamlit as st
from typing import Callable

from models import CartLine, Product


def render_cart_item_row(
    line: CartLine,
    on_toggle: Callable[[Product], None],
    on_increment: Callable[[Product], None],
    on_decrement: Callable[[Product], None],
    on_edit: Callable[[Product], None],
    on_delete: Callable[[Product], None],
):
    """
    Render one shopping list row.

    Args:
        line: The list line (product, count, purchased flag)
        on_toggle: Mark bought for pending lines, mark not bought for bought lines
        on_increment: Callback to add one unit
        on_decrement: Callback to take one unit off
        on_edit: Callback to open the quantity editor
        on_delete: Callback to remove the item
    """
    product = line.product
    key = f"{'bought' if line.purchased else 'pending'}_{product.id}"

    col_check, col_item, col_minus, col_qty, col_plus, col_edit, col_delete = st.columns(
        [0.5, 4, 0.5, 0.7, 0.5, 0.5, 0.5]
    )

    with col_check:
        checked = st.checkbox(
            "bought",
            value=line.purchased,
            key=f"check_{key}",
            label_visibility="collapsed",
        )
        if checked != line.purchased:
            on_toggle(product)
            st.rerun()

    with col_item:
        if line.purchased:
            st.markdown(f"{product.icon} ~~{product.name}~~")
            st.caption(f"~~{product.description}~~")
        else:
            st.markdown(f"{product.icon} **{product.name}**")
            st.caption(product.description)

    with col_minus:
        if st.button("−", key=f"minus_{key}"):
            on_decrement(product)
            st.rerun()

    with col_qty:
        st.markdown(f"**{line.count}**")

    with col_plus:
        if st.button("+", key=f"plus_{key}"):
            on_increment(product)
            st.rerun()

    with col_edit:
        if st.button("✏️", key=f"edit_{key}", help="Edit quantity"):
            on_edit(product)
            st.rerun()

    with col_delete:
        if st.button("🗑️", key=f"delete_{key}", help="Delete"):
            on_delete(product)
            st.rerun()


def render_quantity_editor(
    line: CartLine,
    on_save: Callable[[Product, int], None],
    on_cancel: Callable[[], None],
):
    """
    Render the quantity editor for a list line.

    Saving moves a bought item back to the list; zero deletes it.
    """
    product = line.product

    with st.container(border=True):
        st.markdown(f"**Edit {product.name}**")
        quantity = st.number_input(
            "Quantity",
            min_value=0,
            value=line.count,
            step=1,
            key=f"edit_qty_{product.id}_{line.count}",
        )

        col_save, col_cancel = st.columns(2)
        with col_save:
            if st.button("Save", key=f"save_qty_{product.id}", type="primary",
                         use_container_width=True):
                on_save(product, int(quantity))
                st.rerun()
        with col_cancel:
            if st.button("Cancel", key=f"cancel_qty_{product.id}", use_container_width=True):
                on_cancel()
                st.rerun()


def render_cart_section(
    title: str,
    lines: list[CartLine],
    editing_product_id,
    on_toggle: Callable[[Product], None],
    on_increment: Callable[[Product], None],
    on_decrement: Callable[[Product], None],
    on_edit: Callable[[Product], None],
    on_delete: Callable[[Product], None],
    on_save: Callable[[Product, int], None],
    on_cancel_edit: Callable[[], None],
):
    """Render a titled section of list lines, hidden when empty."""
    if not lines:
        return

    st.markdown(f"#### {title}")

    for line in lines:
        render_cart_item_row(
            line=line,
            on_toggle=on_toggle,
            on_increment=on_increment,
            on_decrement=on_decrement,
            on_edit=on_edit,
            on_delete=on_delete,
        )
        if editing_product_id == line.product.id:
            render_quantity_editor(line, on_save, on_cancel_edit)

    st.markdown("")  # Spacing between sections
