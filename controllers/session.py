"""
Session wiring shared by the controllers.

Streamlit keeps one session state per browser tab. The cart store is
created there once and handed to every controller, so the catalog page
and the cart page work on the same list.
"""

from typing import Any, MutableMapping, Optional

import streamlit as st

from services.cart_store import CartStore

CART_STORE_KEY = "cart_store"


def resolve_state(state: Optional[MutableMapping[str, Any]] = None) -> MutableMapping[str, Any]:
    """Use the given mapping, or Streamlit's session state."""
    return st.session_state if state is None else state


def get_cart_store(state: MutableMapping[str, Any]) -> CartStore:
    """Get the session's cart store, creating it on first use."""
    if CART_STORE_KEY not in state:
        state[CART_STORE_KEY] = CartStore()
    return state[CART_STORE_KEY]
