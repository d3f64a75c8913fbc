# backend/app/schemas/product_schema.py
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import PlainSerializer

from app.models.product import Product
from app.schemas.base import WireModel

CENT = Decimal("0.01")

# JSON number rounded to cents, as the storefront expects
Price = Annotated[
    Decimal, PlainSerializer(lambda v: float(v.quantize(CENT)), return_type=float, when_used="json")
]


class ProductIn(WireModel):
    name: str
    price: Decimal
    category_id: int
    description: str = ""
    color: Optional[str] = None
    stock: int = 0
    featured: bool = False
    image_url: Optional[str] = None

    def to_model(self) -> Product:
        return Product(
            name=self.name,
            price=self.price,
            category_id=self.category_id,
            description=self.description,
            color=self.color,
            stock=self.stock,
            featured=self.featured,
            image_url=self.image_url,
        )


class ProductOut(WireModel):
    product_id: int
    name: str
    price: Price
    category_id: int
    description: Optional[str] = None
    color: Optional[str] = None
    stock: int
    featured: bool
    image_url: Optional[str] = None
