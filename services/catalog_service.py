"""
Catalog Service - filtering and grouping for product lists.

Pure functions over sequences of products. They back the catalog screen
(search box, category chips, grouped sections) and the cart screen
(sections sorted by name).
"""

from typing import Iterable, Optional

from models.cart import CartLine
from models.product import Product


def list_categories(products: Iterable[Product]) -> list[str]:
    """Unique category labels, sorted."""
    return sorted({p.category for p in products})


def filter_products(
    products: Iterable[Product],
    query: str = "",
    category: Optional[str] = None,
) -> list[Product]:
    """
    Filter products by category and search text.

    Args:
        products: Products to filter, order is preserved
        query: Case-insensitive text matched against name or description
        category: Exact category label, or None for all categories

    Returns:
        Matching products
    """
    result = list(products)

    if category is not None:
        result = [p for p in result if p.category == category]

    needle = (query or "").strip().lower()
    if needle:
        result = [
            p for p in result
            if needle in p.name.lower() or needle in p.description.lower()
        ]

    return result


def group_by_category(products: Iterable[Product]) -> dict[str, list[Product]]:
    """Group products by category, keys sorted, input order kept inside each group."""
    grouped: dict[str, list[Product]] = {}
    for product in products:
        grouped.setdefault(product.category, []).append(product)

    return {k: grouped[k] for k in sorted(grouped.keys())}


def sort_lines_by_name(lines: Iterable[CartLine]) -> list[CartLine]:
    return sorted(lines, key=lambda line: line.product.name)
