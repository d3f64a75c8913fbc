from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

# Bind type for money columns and price filters; drivers without native
# Decimal support get a float at the boundary.
PRICE = Numeric(10, 2)

users = Table(
    "users",
    metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(50), unique=True, nullable=False),
    Column("role", String(50), nullable=False, default="ROLE_USER"),
)

categories = Table(
    "categories",
    metadata,
    Column("category_id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
    Column("description", Text),
)

products = Table(
    "products",
    metadata,
    Column("product_id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
    Column("price", PRICE, nullable=False),
    Column("category_id", Integer, ForeignKey("categories.category_id"), nullable=False),
    Column("description", Text),
    Column("color", String(20)),
    Column("image_url", String(200)),
    Column("stock", Integer, nullable=False, default=0),
    Column("featured", Boolean, nullable=False, default=False),
)

profiles = Table(
    "profiles",
    metadata,
    Column("user_id", Integer, ForeignKey("users.user_id"), primary_key=True, autoincrement=False),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("phone", String(20), nullable=False),
    Column("email", String(200), nullable=False),
    Column("address", String(200), nullable=False),
    Column("city", String(50), nullable=False),
    Column("state", String(2), nullable=False),
    Column("zip", String(20), nullable=False),
)
