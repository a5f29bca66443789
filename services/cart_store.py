"""
Cart Store - the shopping list state and every way it can change.

The store keeps two mappings keyed by product id:
- pending: products on the list that still have to be bought
- purchased: products already marked as bought

A product id is a key in at most one of them, and never with a count
below 1. Every operation is total: out-of-range counts and unknown
products are normalized or ignored instead of raising.

Subscribers registered with subscribe() are called after each operation
that actually changed the state. This is how the UI layer (or anything
else) learns about updates without polling.
"""

import logging
import uuid
from typing import Callable, Optional

from config.settings import get_settings
from models.cart import CartLine, ItemStatus
from models.product import Product

logger = logging.getLogger(__name__)

Subscriber = Callable[["CartStore"], None]


class CartStore:
    """In-memory shopping list with pending and purchased sections."""

    def __init__(
        self,
        custom_icon: Optional[str] = None,
        custom_description: Optional[str] = None,
        custom_category: Optional[str] = None,
    ):
        settings = get_settings()
        self.custom_icon = custom_icon or settings.custom_product_icon
        self.custom_description = custom_description or settings.custom_product_description
        self.custom_category = custom_category or settings.custom_product_category

        self._pending: dict[uuid.UUID, int] = {}
        self._purchased: dict[uuid.UUID, int] = {}
        self._products: dict[uuid.UUID, Product] = {}
        self._subscribers: list[Subscriber] = []

    # ==========================================
    # Subscriptions
    # ==========================================

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback run after every state change.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Cart subscriber %r failed", callback)

    # ==========================================
    # Mutations
    # ==========================================

    def add(self, product: Product):
        """
        Add one unit to the list.

        A purchased product is moved back to pending first, carrying its
        bought count over before the increment.
        """
        count = self._pending.get(product.id, 0) + self._purchased.pop(product.id, 0)
        self._pending[product.id] = count + 1
        self._products[product.id] = product
        logger.debug("Added %s (pending=%d)", product.name, self._pending[product.id])
        self._notify()

    def decrement(self, product: Product):
        """
        Take one unit off the product.

        Pending is checked first, then purchased; only one mapping is touched.
        A count reaching zero removes the product.
        """
        if self._pending.get(product.id, 0) > 0:
            self._decrement_in(self._pending, product)
        elif self._purchased.get(product.id, 0) > 0:
            self._decrement_in(self._purchased, product)
        else:
            return
        self._notify()

    def _decrement_in(self, mapping: dict[uuid.UUID, int], product: Product):
        count = mapping[product.id] - 1
        if count > 0:
            mapping[product.id] = count
        else:
            del mapping[product.id]
            self._forget_if_absent(product.id)
        logger.debug("Decremented %s to %d", product.name, count)

    def remove(self, product: Product):
        """Delete the product from both sections."""
        had_pending = self._pending.pop(product.id, None) is not None
        had_purchased = self._purchased.pop(product.id, None) is not None
        if not (had_pending or had_purchased):
            return

        self._products.pop(product.id, None)
        logger.debug("Removed %s", product.name)
        self._notify()

    def set_quantity(self, product: Product, count: int):
        """
        Set the pending quantity of a product.

        A purchased product moves back to pending with the new count.
        A count of zero or less removes the product.
        """
        if count <= 0:
            self.remove(product)
            return

        self._purchased.pop(product.id, None)
        self._pending[product.id] = count
        self._products[product.id] = product
        logger.debug("Set %s quantity to %d", product.name, count)
        self._notify()

    def mark_purchased(self, product: Product):
        """Move a pending product to purchased, keeping its count."""
        count = self._pending.pop(product.id, None)
        if count is None:
            return

        self._purchased[product.id] = count
        logger.debug("Marked %s as purchased", product.name)
        self._notify()

    def mark_pending(self, product: Product):
        """Move a purchased product back to pending, keeping its count."""
        count = self._purchased.pop(product.id, None)
        if count is None:
            return

        self._pending[product.id] = count
        logger.debug("Marked %s as pending", product.name)
        self._notify()

    def clear(self):
        """Empty the whole list."""
        if not self._pending and not self._purchased:
            return

        self._pending.clear()
        self._purchased.clear()
        self._products.clear()
        logger.debug("Cleared shopping list")
        self._notify()

    def add_custom_product(self, name: str, count: int = 1) -> Product:
        """
        Create a user-defined product and put it on the list.

        The caller is expected to reject blank names before calling.
        Every call creates a new identity, even for a name already on
        the list. A count below 1 creates the product without listing it.

        Args:
            name: Product name as typed by the user
            count: Initial pending quantity

        Returns:
            The newly created Product
        """
        product = Product(
            name=name,
            icon=self.custom_icon,
            description=self.custom_description,
            category=self.custom_category,
            is_custom=True,
        )
        if count <= 0:
            logger.debug("Ignoring custom product %s with count %d", name, count)
            return product

        self._pending[product.id] = count
        self._products[product.id] = product
        logger.debug("Added custom product %s (pending=%d)", name, count)
        self._notify()
        return product

    def _forget_if_absent(self, product_id: uuid.UUID):
        if product_id not in self._pending and product_id not in self._purchased:
            self._products.pop(product_id, None)

    # ==========================================
    # Read-only Views
    # ==========================================

    def total_count(self) -> int:
        """Sum of all quantities in both sections."""
        return self.pending_count() + self.purchased_count()

    def pending_count(self) -> int:
        """Units still to buy."""
        return sum(self._pending.values())

    def purchased_count(self) -> int:
        """Units already bought."""
        return sum(self._purchased.values())

    def pending(self) -> dict[Product, int]:
        """Snapshot of pending products in insertion order."""
        return {self._products[pid]: count for pid, count in self._pending.items()}

    def purchased(self) -> dict[Product, int]:
        """Snapshot of purchased products in insertion order."""
        return {self._products[pid]: count for pid, count in self._purchased.items()}

    def pending_lines(self) -> list[CartLine]:
        return [
            CartLine(product=self._products[pid], count=count, purchased=False)
            for pid, count in self._pending.items()
        ]

    def purchased_lines(self) -> list[CartLine]:
        return [
            CartLine(product=self._products[pid], count=count, purchased=True)
            for pid, count in self._purchased.items()
        ]

    def quantity_of(self, product: Product) -> int:
        """Pending count, else purchased count, else 0."""
        return self._pending.get(product.id) or self._purchased.get(product.id) or 0

    def status_of(self, product: Product) -> ItemStatus:
        if product.id in self._pending:
            return ItemStatus.PENDING
        if product.id in self._purchased:
            return ItemStatus.PURCHASED
        return ItemStatus.ABSENT

    def is_empty(self) -> bool:
        return not self._pending and not self._purchased

    def __len__(self) -> int:
        return len(self._pending) + len(self._purchased)

    def __contains__(self, product: object) -> bool:
        return isinstance(product, Product) and (
            product.id in self._pending or product.id in self._purchased
        )
