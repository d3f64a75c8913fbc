from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Category:
    name: str
    description: str = ""
    category_id: Optional[int] = None
