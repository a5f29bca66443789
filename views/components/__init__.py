"""
Reusable UI components.
"""

from views.components.product_card import (
    render_product_card,
    render_product_row,
    render_product_detail,
)
from views.components.category_selector import render_category_selector
from views.components.custom_item_form import render_custom_item_form
from views.components.cart_item import (
    render_cart_item_row,
    render_quantity_editor,
    render_cart_section,
)
from views.components.cart_stats import render_cart_stats

# Sidebar components
from views.components.sidebar import render_cart_sidebar

__all__ = [
    # Catalog
    "render_product_card",
    "render_product_row",
    "render_product_detail",
    "render_category_selector",
    # Shopping list
    "render_cart_item_row",
    "render_quantity_editor",
    "render_cart_section",
    "render_cart_stats",
    "render_custom_item_form",
    # Sidebar
    "render_cart_sidebar",
]
