"""
Cart Controller - manages the shopping list screen and interactions.

This controller handles:
- Listing items to buy and items already bought
- Moving items between the two sections
- Editing quantities and deleting items
- Validating and adding custom items typed by the user
"""

import logging
from typing import Any, MutableMapping, Optional

from controllers.session import get_cart_store, resolve_state
from models import CartLine, Product
from services.cart_store import CartStore
from services.catalog_service import sort_lines_by_name

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


class CartController:
    """Controller for shopping list management."""

    def __init__(
        self,
        state: Optional[MutableMapping[str, Any]] = None,
        store: Optional[CartStore] = None,
    ):
        self._state = resolve_state(state)
        self.store = store if store is not None else get_cart_store(self._state)
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "cart" not in self._state:
            self._state["cart"] = {
                "editing_product_id": None,
                "show_custom_form": False,
            }

    # ==========================================
    # Session State
    # ==========================================

    def get_editing_product_id(self):
        """Get the id of the item whose quantity editor is open."""
        return self._state["cart"]["editing_product_id"]

    def set_editing_product(self, product: Optional[Product]):
        self._state["cart"]["editing_product_id"] = product.id if product else None

    def is_custom_form_open(self) -> bool:
        return self._state["cart"]["show_custom_form"]

    def set_custom_form_open(self, is_open: bool):
        self._state["cart"]["show_custom_form"] = is_open

    # ==========================================
    # List Queries
    # ==========================================

    def get_pending_lines(self) -> list[CartLine]:
        """Get items still to buy, sorted by name."""
        return sort_lines_by_name(self.store.pending_lines())

    def get_purchased_lines(self) -> list[CartLine]:
        """Get items already bought, sorted by name."""
        return sort_lines_by_name(self.store.purchased_lines())

    def is_empty(self) -> bool:
        return self.store.is_empty()

    def get_total_count(self) -> int:
        return self.store.total_count()

    def get_progress(self) -> tuple[int, int]:
        """Get (units to buy, units bought)."""
        return self.store.pending_count(), self.store.purchased_count()

    # ==========================================
    # Item Operations
    # ==========================================

    def mark_purchased(self, product: Product):
        self.store.mark_purchased(product)

    def mark_pending(self, product: Product):
        self.store.mark_pending(product)

    def increment(self, product: Product):
        self.store.add(product)

    def decrement(self, product: Product):
        self.store.decrement(product)

    def save_quantity(self, product: Product, count: int):
        """Save an edited quantity; zero removes the item."""
        self.store.set_quantity(product, count)
        self.set_editing_product(None)

    def delete_item(self, product: Product):
        """Delete an item from the list entirely."""
        self.store.remove(product)
        if self.get_editing_product_id() == product.id:
            self.set_editing_product(None)

    def clear_list(self):
        """Remove every item from the list."""
        self.store.clear()
        self.set_editing_product(None)

    # ==========================================
    # Custom Items
    # ==========================================

    def validate_product_name(self, name: str) -> tuple[bool, str]:
        """Validate a custom product name. Returns (is_valid, message)."""
        cleaned = (name or "").strip()
        if not cleaned:
            return False, "Enter a product name"
        if len(cleaned) > MAX_NAME_LENGTH:
            return False, f"Name must be at most {MAX_NAME_LENGTH} characters"
        return True, "Valid"

    def add_custom_item(self, name: str, quantity: int) -> Optional[Product]:
        """
        Add a user-defined product to the list.

        Args:
            name: Name typed by the user
            quantity: Number of units, at least 1

        Returns:
            The created Product, or None if the input was rejected
        """
        is_valid, message = self.validate_product_name(name)
        if not is_valid:
            logger.info(f"Rejected custom item: {message}")
            return None
        if quantity < 1:
            logger.info(f"Rejected custom item {name!r}: quantity {quantity}")
            return None

        product = self.store.add_custom_product(name.strip(), quantity)
        self.set_custom_form_open(False)
        return product
