"""
Catalog Controller - manages the product browsing screen.

This controller handles:
- Search text and selected category
- Grouping the filtered catalog for display
- Adding products to the list and editing their quantity
- The product shown in the detail panel
"""

from typing import Any, MutableMapping, Optional

from controllers.session import get_cart_store, resolve_state
from models import Product, get_catalog
from services.cart_store import CartStore
from services.catalog_service import filter_products, group_by_category, list_categories


class CatalogController:
    """Controller for the catalog screen."""

    def __init__(
        self,
        state: Optional[MutableMapping[str, Any]] = None,
        store: Optional[CartStore] = None,
        products: Optional[list[Product]] = None,
    ):
        self._state = resolve_state(state)
        self.store = store if store is not None else get_cart_store(self._state)
        self.products = products if products is not None else get_catalog()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "catalog" not in self._state:
            self._state["catalog"] = {
                "search_text": "",
                "selected_category": None,  # None means all categories
                "selected_product_id": None,
                "show_custom_form": False,
            }

    # ==========================================
    # Session State
    # ==========================================

    def get_search_text(self) -> str:
        return self._state["catalog"]["search_text"]

    def set_search_text(self, text: str):
        self._state["catalog"]["search_text"] = text or ""

    def get_selected_category(self) -> Optional[str]:
        return self._state["catalog"]["selected_category"]

    def set_selected_category(self, category: Optional[str]):
        self._state["catalog"]["selected_category"] = category

    def get_selected_product(self) -> Optional[Product]:
        """Get the product open in the detail panel."""
        product_id = self._state["catalog"]["selected_product_id"]
        if product_id is None:
            return None
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def select_product(self, product: Optional[Product]):
        self._state["catalog"]["selected_product_id"] = product.id if product else None

    def is_custom_form_open(self) -> bool:
        return self._state["catalog"]["show_custom_form"]

    def set_custom_form_open(self, is_open: bool):
        self._state["catalog"]["show_custom_form"] = is_open

    # ==========================================
    # Catalog Queries
    # ==========================================

    def get_categories(self) -> list[str]:
        """Get all catalog categories, sorted."""
        return list_categories(self.products)

    def get_grouped_products(self) -> dict[str, list[Product]]:
        """Get the catalog filtered by the current search and category."""
        filtered = filter_products(
            self.products,
            query=self.get_search_text(),
            category=self.get_selected_category(),
        )
        return group_by_category(filtered)

    # ==========================================
    # Cart Operations
    # ==========================================

    def add_to_list(self, product: Product):
        """Add one unit of a product to the shopping list."""
        self.store.add(product)

    def save_quantity(self, product: Product, count: int):
        """Save the quantity picked in the detail panel."""
        self.store.set_quantity(product, count)

    def get_quantity(self, product: Product) -> int:
        """Get the product's count on the list, pending or purchased."""
        return self.store.quantity_of(product)

    def get_status(self, product: Product):
        return self.store.status_of(product)

    def get_total_count(self) -> int:
        return self.store.total_count()
