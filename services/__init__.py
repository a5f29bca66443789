"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.cart_store import CartStore
from services.catalog_service import (
    filter_products,
    group_by_category,
    list_categories,
    sort_lines_by_name,
)

__all__ = [
    "CartStore",
    "filter_products",
    "group_by_category",
    "list_categories",
    "sort_lines_by_name",
]
