"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides products, a fresh cart store and controllers wired to a plain
dict in place of Streamlit's session state.

==============================================================================
"""

import pytest

from config.settings import get_settings
from controllers.cart_controller import CartController
from controllers.catalog_controller import CatalogController
from models import Product
from services.cart_store import CartStore


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def milk() -> Product:
    return Product(name="Milk", icon="🥛", description="Fresh milk, 1 l", category="Dairy")


@pytest.fixture
def bread() -> Product:
    return Product(name="Bread", icon="🍞", description="Wheat bread", category="Bakery")


@pytest.fixture
def products(milk: Product, bread: Product) -> list[Product]:
    return [
        milk,
        Product(name="Cheese", icon="🧀", description="Semi-hard, 200 g", category="Dairy"),
        bread,
        Product(name="Apples", icon="🍏", description="Golden apples", category="Fruits"),
        Product(name="Baguette", icon="🥖", description="French bread", category="Bakery"),
    ]


# ============================================================================
# STORE AND CONTROLLER FIXTURES
# ============================================================================

@pytest.fixture
def store() -> CartStore:
    return CartStore()


@pytest.fixture
def session_state() -> dict:
    """Stand-in for st.session_state."""
    return {}


@pytest.fixture
def cart_controller(session_state: dict) -> CartController:
    return CartController(state=session_state)


@pytest.fixture
def catalog_controller(session_state: dict, products: list[Product]) -> CatalogController:
    return CatalogController(state=session_state, products=products)
