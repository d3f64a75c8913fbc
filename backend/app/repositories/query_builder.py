"""
Filter criteria -> parameterized WHERE predicate for product search.

Clauses are emitted in a fixed order (category, min price, max price, color)
and the bound parameters follow the same order, one per clause. Values only
ever travel as bound parameters.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import Integer, String, bindparam, text
from sqlalchemy.sql.elements import BindParameter, TextClause

from app.db.tables import PRICE

ALWAYS_TRUE = "1=1"


@dataclass(frozen=True)
class ProductSearchCriteria:
    category_id: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class Predicate:
    clauses: Tuple[str, ...]
    params: Tuple[BindParameter, ...]

    @property
    def sql(self) -> str:
        return " AND ".join((ALWAYS_TRUE,) + self.clauses)

    def apply(self, base_sql: str, order_by: Optional[str] = None) -> TextClause:
        """Attach the predicate to ``base_sql`` and bind its values."""
        sql = f"{base_sql} WHERE {self.sql}"
        if order_by:
            sql += f" ORDER BY {order_by}"
        return text(sql).bindparams(*self.params)


def build_product_predicate(criteria: ProductSearchCriteria) -> Predicate:
    candidates: List[Tuple[bool, str, BindParameter]] = [
        (
            criteria.category_id is not None,
            "category_id = :category_id",
            bindparam("category_id", criteria.category_id, type_=Integer),
        ),
        (
            criteria.min_price is not None,
            "price >= :min_price",
            bindparam("min_price", criteria.min_price, type_=PRICE),
        ),
        (
            criteria.max_price is not None,
            "price <= :max_price",
            bindparam("max_price", criteria.max_price, type_=PRICE),
        ),
        # empty string means "no colour filter", not "colour is empty"
        (
            bool(criteria.color),
            "color = :color",
            bindparam("color", criteria.color, type_=String),
        ),
    ]
    present = [(clause, param) for is_present, clause, param in candidates if is_present]
    return Predicate(
        clauses=tuple(clause for clause, _ in present),
        params=tuple(param for _, param in present),
    )
