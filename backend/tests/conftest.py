from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from app.db import ConnectionProvider, create_db_engine, get_connection_provider, init_db
from app.main import app
from app.models.product import Product
from app.repositories.product_repo import ProductRepository
from app.security import create_access_token


def bearer(username: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(username)}"}


@pytest.fixture
def provider(tmp_path):
    # fresh database file per test
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(bind=engine, reset=True)
    provider = ConnectionProvider(engine)
    with provider.connection() as conn:
        conn.execute(
            text(
                "INSERT INTO users (user_id, username, role) VALUES "
                "(1, 'admin', 'ROLE_ADMIN'), (2, 'user', 'ROLE_USER'), (3, 'george', 'ROLE_USER')"
            )
        )
    yield provider
    engine.dispose()


@pytest.fixture
def catalogue(provider):
    """Categories 3 and 4 with three products; returns the created products."""
    with provider.connection() as conn:
        conn.execute(
            text(
                "INSERT INTO categories (category_id, name, description) VALUES "
                "(3, 'Electronics', 'Gadgets'), (4, 'Fashion', 'Clothes')"
            )
        )
    repo = ProductRepository(provider)
    return [
        repo.create(Product(name="Cable", price=Decimal("5.00"), category_id=3, color="black", stock=10)),
        repo.create(Product(name="Headphones", price=Decimal("15.00"), category_id=3, color="red", stock=4)),
        repo.create(Product(name="Scarf", price=Decimal("20.00"), category_id=4, color="red", featured=True)),
    ]


@pytest.fixture
def client(provider):
    app.dependency_overrides[get_connection_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return bearer("admin")


@pytest.fixture
def user_headers():
    return bearer("user")


@pytest.fixture
def george_headers():
    return bearer("george")


@pytest.fixture
def stranger_headers():
    return bearer("nobody")


@pytest.fixture
def expired_admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin', ttl_seconds=-60)}"}
