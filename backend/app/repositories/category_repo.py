import dataclasses
import logging
from typing import List, Optional

from sqlalchemy import text

from app.models.category import Category
from app.repositories.base import SqlRepository, WriteOutcome
from app.repositories.row_mappers import map_category_row

logger = logging.getLogger(__name__)

_LIST = text("SELECT * FROM categories ORDER BY category_id")
_GET_BY_ID = text("SELECT * FROM categories WHERE category_id = :category_id")
_INSERT = text("INSERT INTO categories (name, description) VALUES (:name, :description)")
_UPDATE = text(
    "UPDATE categories SET name = :name, description = :description "
    "WHERE category_id = :category_id"
)
_DELETE = text("DELETE FROM categories WHERE category_id = :category_id")


class CategoryRepository(SqlRepository):

    def list_all(self) -> List[Category]:
        return self._fetch_all(_LIST, map_category_row)

    def get_by_id(self, category_id: int) -> Optional[Category]:
        return self._fetch_one(_GET_BY_ID, map_category_row, {"category_id": category_id})

    def create(self, category: Category) -> Category:
        """Insert ``category``; the returned copy carries the generated id."""
        result = self._execute(
            _INSERT, {"name": category.name, "description": category.description}
        )
        logger.info(f"Added category #{result.lastrowid} ({category.name})")
        return dataclasses.replace(category, category_id=result.lastrowid)

    def update(self, category_id: int, category: Category) -> WriteOutcome:
        result = self._execute(
            _UPDATE,
            {
                "name": category.name,
                "description": category.description,
                "category_id": category_id,
            },
        )
        if result.rowcount == 0:
            return WriteOutcome.NO_ROWS_AFFECTED
        return WriteOutcome.UPDATED

    def delete(self, category_id: int) -> None:
        # products in the category are left alone
        self._execute(_DELETE, {"category_id": category_id})
