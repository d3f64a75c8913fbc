from typing import Optional

from app.models.category import Category
from app.schemas.base import WireModel


class CategoryIn(WireModel):
    name: str
    description: str = ""

    def to_model(self) -> Category:
        return Category(name=self.name, description=self.description)


class CategoryOut(WireModel):
    category_id: Optional[int] = None
    name: str
    description: Optional[str] = None
