"""
Row -> record conversion for every table.

Each mapper reads its columns by name and builds exactly one record. Values
are passed through as stored; the only coercions are for drivers that hand
back floats for NUMERIC columns or 0/1 for booleans.
"""

from decimal import Decimal
from typing import Any, Mapping

from app.models.category import Category
from app.models.product import Product
from app.models.profile import Profile
from app.models.user import User


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so 19.99 stays 19.99 instead of the binary float expansion
    return Decimal(str(value))


def map_category_row(row: Mapping[str, Any]) -> Category:
    return Category(
        category_id=row["category_id"],
        name=row["name"],
        description=row["description"],
    )


def map_product_row(row: Mapping[str, Any]) -> Product:
    return Product(
        product_id=row["product_id"],
        name=row["name"],
        price=_to_decimal(row["price"]),
        category_id=row["category_id"],
        description=row["description"],
        color=row["color"],
        stock=row["stock"],
        featured=bool(row["featured"]),
        image_url=row["image_url"],
    )


def map_profile_row(row: Mapping[str, Any]) -> Profile:
    return Profile(
        user_id=row["user_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row["phone"],
        email=row["email"],
        address=row["address"],
        city=row["city"],
        state=row["state"],
        zip=row["zip"],
    )


def map_user_row(row: Mapping[str, Any]) -> User:
    return User(user_id=row["user_id"], username=row["username"], role=row["role"])
