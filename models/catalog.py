"""
Static product catalog.

Built once at import time; the Product identities live for the whole
process, which is what lets the cart key on them across Streamlit reruns.
"""

from models.product import Product


def _product(name: str, icon: str, description: str, category: str) -> Product:
    return Product(name=name, icon=icon, description=description, category=category)


CATALOG: list[Product] = [
    # Dairy
    _product("Milk", "🥛", "Fresh milk 2.5%, 1 l", "Dairy"),
    _product("Cheese", "🧀", "Semi-hard cheese, 200 g", "Dairy"),
    _product("Cottage cheese", "🥣", "Cottage cheese 5%, 200 g", "Dairy"),
    _product("Sour cream", "🥄", "Sour cream 15%, 200 g", "Dairy"),
    _product("Yogurt", "🍶", "Fruit yogurt, 150 g", "Dairy"),
    _product("Kefir", "🥛", "Kefir 2.5%, 1 l", "Dairy"),
    _product("Butter", "🧈", "Butter 82.5%, 180 g", "Dairy"),

    # Bakery
    _product("White bread", "🍞", "Wheat bread, 300 g", "Bakery"),
    _product("Loaf", "🥖", "Sliced loaf, 300 g", "Bakery"),
    _product("Baguette", "🥖", "French baguette, 250 g", "Bakery"),
    _product("Buns", "🥯", "Poppy seed buns, 4 pcs", "Bakery"),
    _product("Lavash", "🫓", "Armenian flatbread, 200 g", "Bakery"),
    _product("Croissants", "🥐", "Chocolate croissants, 4 pcs", "Bakery"),

    # Fruits & Vegetables
    _product("Apples", "🍏", "Golden apples, 1 kg", "Fruits & Vegetables"),
    _product("Bananas", "🍌", "Bananas, 1 kg", "Fruits & Vegetables"),
    _product("Cucumbers", "🥒", "Fresh cucumbers, 500 g", "Fruits & Vegetables"),
    _product("Tomatoes", "🍅", "Tomatoes, 500 g", "Fruits & Vegetables"),
    _product("Potatoes", "🥔", "New potatoes, 1 kg", "Fruits & Vegetables"),
    _product("Carrots", "🥕", "Fresh carrots, 1 kg", "Fruits & Vegetables"),
    _product("Oranges", "🍊", "Oranges, 1 kg", "Fruits & Vegetables"),
    _product("Onions", "🧅", "Yellow onions, 1 kg", "Fruits & Vegetables"),

    # Meat & Fish
    _product("Chicken fillet", "🍗", "Chilled chicken fillet, 500 g", "Meat & Fish"),
    _product("Ground beef", "🥩", "Ground beef, 400 g", "Meat & Fish"),
    _product("Pork", "🥓", "Pork for frying, 500 g", "Meat & Fish"),
    _product("Salmon", "🐟", "Salmon fillet, 300 g", "Meat & Fish"),
    _product("Bologna", "🌭", "Boiled sausage, 400 g", "Meat & Fish"),
    _product("Shrimp", "🦐", "Peeled shrimp, 300 g", "Meat & Fish"),

    # Household
    _product("Soap", "🧼", "Laundry soap, 100 g", "Household"),
    _product("Shampoo", "🧴", "Shampoo for all hair types, 250 ml", "Household"),
    _product("Toothpaste", "🪥", "Complete care toothpaste, 100 ml", "Household"),
    _product("Shower gel", "🧴", "Moisturizing shower gel, 250 ml", "Household"),
    _product("Dish sponges", "🧽", "Dish washing sponges, 5 pcs", "Household"),
    _product("Laundry powder", "✨", "Universal laundry powder, 1 kg", "Household"),
]


def get_catalog() -> list[Product]:
    """Get the static product catalog."""
    return CATALOG
