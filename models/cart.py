"""
Cart snapshot types returned by the cart store's read-only views.
"""

from dataclasses import dataclass
from enum import Enum

from models.product import Product


class ItemStatus(str, Enum):
    """Where a product currently sits in the shopping list."""
    ABSENT = "absent"
    PENDING = "pending"
    PURCHASED = "purchased"


@dataclass(frozen=True)
class CartLine:
    """One row of the shopping list."""
    product: Product
    count: int
    purchased: bool = False
