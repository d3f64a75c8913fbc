"""
Domain record for catalogue products.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Product:
    """
    A product as stored in the ``products`` table.

    Attributes:
        product_id: Storage-generated key (None before insert).
        name: Display name.
        price: Unit price; never a float.
        category_id: Owning category.
        description: Free text.
        color: Optional colour used by the search filter.
        stock: Units on hand.
        featured: Shown on the storefront landing page.
        image_url: Optional image path or URL.
    """
    name: str
    price: Decimal
    category_id: int
    description: str = ""
    color: Optional[str] = None
    stock: int = 0
    featured: bool = False
    image_url: Optional[str] = None
    product_id: Optional[int] = None
