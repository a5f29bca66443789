"""
Models layer - product and cart data structures.
"""

from models.product import Product
from models.cart import CartLine, ItemStatus
from models.catalog import CATALOG, get_catalog

__all__ = ["Product", "CartLine", "ItemStatus", "CATALOG", "get_catalog"]
