import logging
from typing import List, Optional

from sqlalchemy import bindparam, text

from app.db.tables import PRICE
from app.models.product import Product
from app.repositories.base import SqlRepository, WriteOutcome
from app.repositories.query_builder import ProductSearchCriteria, build_product_predicate
from app.repositories.row_mappers import map_product_row

logger = logging.getLogger(__name__)

SELECT_ALL = "SELECT * FROM products"

_GET_BY_ID = text("SELECT * FROM products WHERE product_id = :product_id")

_INSERT = text(
    "INSERT INTO products (name, price, category_id, description, color, image_url, stock, featured) "
    "VALUES (:name, :price, :category_id, :description, :color, :image_url, :stock, :featured)"
).bindparams(bindparam("price", type_=PRICE))

_UPDATE = text(
    "UPDATE products SET name = :name, price = :price, category_id = :category_id, "
    "description = :description, color = :color, image_url = :image_url, "
    "stock = :stock, featured = :featured "
    "WHERE product_id = :product_id"
).bindparams(bindparam("price", type_=PRICE))

_DELETE = text("DELETE FROM products WHERE product_id = :product_id")


def _columns(product: Product) -> dict:
    return {
        "name": product.name,
        "price": product.price,
        "category_id": product.category_id,
        "description": product.description,
        "color": product.color,
        "image_url": product.image_url,
        "stock": product.stock,
        "featured": product.featured,
    }


class ProductRepository(SqlRepository):

    def search(self, criteria: ProductSearchCriteria) -> List[Product]:
        """
        Products matching every criterion that is set; no criteria lists all.
        """
        stmt = build_product_predicate(criteria).apply(SELECT_ALL, order_by="product_id")
        return self._fetch_all(stmt, map_product_row)

    def list_all(self) -> List[Product]:
        return self.search(ProductSearchCriteria())

    def list_by_category_id(self, category_id: int) -> List[Product]:
        return self.search(ProductSearchCriteria(category_id=category_id))

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._fetch_one(_GET_BY_ID, map_product_row, {"product_id": product_id})

    def create(self, product: Product) -> Optional[Product]:
        """
        Insert ``product`` and return it as stored, re-read by its generated id
        so defaults applied by the database are reflected.
        """
        result = self._execute(_INSERT, _columns(product))
        if result.rowcount <= 0 or result.lastrowid is None:
            return None
        logger.info(f"Added product #{result.lastrowid} ({product.name})")
        return self.get_by_id(result.lastrowid)

    def update(self, product_id: int, product: Product) -> WriteOutcome:
        # existence is checked first so a missing row is reported as such
        # rather than as an update that touched nothing
        if self.get_by_id(product_id) is None:
            return WriteOutcome.NOT_FOUND
        params = _columns(product)
        params["product_id"] = product_id
        result = self._execute(_UPDATE, params)
        if result.rowcount == 0:
            logger.error(f"Update of product #{product_id} affected no rows")
            return WriteOutcome.NO_ROWS_AFFECTED
        return WriteOutcome.UPDATED

    def delete(self, product_id: int) -> None:
        result = self._execute(_DELETE, {"product_id": product_id})
        if result.rowcount:
            logger.info(f"Deleted product #{product_id}")
