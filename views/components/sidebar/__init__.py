"""
Sidebar components for different views.
"""

from views.components.sidebar.cart import render_cart_sidebar

__all__ = ["render_cart_sidebar"]
