"""
Controllers layer - orchestration and session state management.
"""

from controllers.catalog_controller import CatalogController
from controllers.cart_controller import CartController

__all__ = ["CatalogController", "CartController"]
