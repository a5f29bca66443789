"""
Cart View - UI for the shopping list itself.

This view handles:
- Showing items to buy and items already bought
- Checking items off and putting them back
- Editing quantities and deleting items
- Clearing the whole list
"""

import streamlit as st

from controllers.cart_controller import CartController
from views.components.cart_item import render_cart_section
from views.components.cart_stats import render_cart_stats
from views.components.custom_item_form import render_custom_item_form


class CartView:
    """View for shopping list UI."""

    def __init__(self):
        self.controller = CartController()

    def render(self):
        """Main render method."""
        col_title, col_custom = st.columns([4, 1])
        with col_title:
            st.title("Shopping List")
        with col_custom:
            if st.button("➕ Own item", use_container_width=True):
                self.controller.set_custom_form_open(True)
                st.rerun()

        if self.controller.is_custom_form_open():
            self._render_custom_form()

        if self.controller.is_empty():
            self._render_empty_state()
            return

        self._render_list()

    def _render_empty_state(self):
        """Render the empty list message."""
        st.markdown("### Your list is empty")
        st.markdown("Add products from the catalog or create your own.")
        if st.button("Browse catalog →", type="primary"):
            st.switch_page("streamlit_app.py")

    def _render_custom_form(self):
        render_custom_item_form(
            form_key="cart_custom_item",
            validate_name=self.controller.validate_product_name,
            on_submit=self.controller.add_custom_item,
            on_cancel=lambda: self.controller.set_custom_form_open(False),
        )

    def _render_list(self):
        """Render both list sections and the clear button."""
        pending = self.controller.get_pending_lines()
        purchased = self.controller.get_purchased_lines()

        to_buy, bought = self.controller.get_progress()
        render_cart_stats(
            to_buy=to_buy,
            bought=bought,
            total=self.controller.get_total_count(),
        )

        st.markdown("---")

        section_callbacks = dict(
            editing_product_id=self.controller.get_editing_product_id(),
            on_increment=self.controller.increment,
            on_decrement=self.controller.decrement,
            on_edit=self.controller.set_editing_product,
            on_delete=self.controller.delete_item,
            on_save=self.controller.save_quantity,
            on_cancel_edit=lambda: self.controller.set_editing_product(None),
        )

        render_cart_section(
            title="To buy",
            lines=pending,
            on_toggle=self.controller.mark_purchased,
            **section_callbacks,
        )
        render_cart_section(
            title="Bought",
            lines=purchased,
            on_toggle=self.controller.mark_pending,
            **section_callbacks,
        )

        st.markdown("---")

        if st.button("Clear list", type="secondary", use_container_width=True):
            self.controller.clear_list()
            st.rerun()
