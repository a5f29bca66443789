"""
Product - the unit the shopping list counts.

Identity is an explicit UUID generated at construction. Display fields do
not take part in equality or hashing, so two products that look the same
are still different entries in the cart.
"""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """A catalog or user-defined product."""
    name: str = field(compare=False)
    icon: str = field(compare=False)
    description: str = field(compare=False)
    category: str = field(compare=False)
    is_custom: bool = field(default=False, compare=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4)
