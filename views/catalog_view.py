"""
Catalog View - UI for browsing products and filling the list.

This view handles:
- Searching the catalog by name or description
- Filtering by category
- Adding products with one click or a chosen quantity
- Adding custom items not in the catalog
"""

import streamlit as st

from config.settings import get_settings
from controllers.catalog_controller import CatalogController
from controllers.cart_controller import CartController
from views.components.sidebar import render_cart_sidebar
from views.components.category_selector import render_category_selector
from views.components.custom_item_form import render_custom_item_form
from views.components.product_card import render_product_row, render_product_detail


class CatalogView:
    """View for the product catalog."""

    def __init__(self):
        self.controller = CatalogController()
        self.cart = CartController(store=self.controller.store)

    def render(self):
        """Main render method."""
        settings = get_settings()

        col_title, col_custom = st.columns([4, 1])
        with col_title:
            st.title(settings.app_title)
        with col_custom:
            if st.button("➕ Own item", use_container_width=True):
                self.controller.set_custom_form_open(True)
                st.rerun()

        render_cart_sidebar(self.controller.get_total_count())

        if self.controller.is_custom_form_open():
            render_custom_item_form(
                form_key="catalog_custom_item",
                validate_name=self.cart.validate_product_name,
                on_submit=self._add_custom_item,
                on_cancel=lambda: self.controller.set_custom_form_open(False),
            )

        self._render_search()
        render_category_selector(
            categories=self.controller.get_categories(),
            selected=self.controller.get_selected_category(),
            on_select=self.controller.set_selected_category,
        )

        selected = self.controller.get_selected_product()
        if selected:
            render_product_detail(
                product=selected,
                quantity=self.controller.get_quantity(selected),
                status=self.controller.get_status(selected),
                on_save=self.controller.save_quantity,
                on_close=lambda: self.controller.select_product(None),
            )

        self._render_products()

    def _render_search(self):
        """Render the search box."""
        text = st.text_input(
            "Search",
            placeholder="Search products",
            label_visibility="collapsed",
            key="catalog_search",
        )
        if text != self.controller.get_search_text():
            self.controller.set_search_text(text)

    def _render_products(self):
        """Render the filtered catalog grouped by category."""
        grouped = self.controller.get_grouped_products()

        if not grouped:
            st.info("No products match your search.")
            return

        for category, products in grouped.items():
            st.markdown(f"### {category}")
            render_product_row(
                products=products,
                get_quantity=self.controller.get_quantity,
                on_add=self.controller.add_to_list,
                on_open=self.controller.select_product,
            )

    def _add_custom_item(self, name: str, quantity: int):
        product = self.cart.add_custom_item(name, quantity)
        if product:
            self.controller.set_custom_form_open(False)
        return product
