"""
Views layer - UI presentation components.
"""

from views.catalog_view import CatalogView
from views.cart_view import CartView

__all__ = ["CatalogView", "CartView"]
