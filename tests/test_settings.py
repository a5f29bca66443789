"""
Tests for environment-driven settings.
"""

from config.settings import get_settings
from services.cart_store import CartStore


def test_defaults():
    settings = get_settings()

    assert settings.app_title == "My Shopping List"
    assert settings.custom_product_category == "Custom"
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SHOPSMART_CUSTOM_PRODUCT_CATEGORY", "Mine")
    monkeypatch.setenv("SHOPSMART_APP_TITLE", "Groceries")

    settings = get_settings()

    assert settings.app_title == "Groceries"
    assert CartStore().add_custom_product("Tea").category == "Mine"


def test_settings_are_cached():
    assert get_settings() is get_settings()
