from fastapi.testclient import TestClient

from app.db import ConnectionProvider, create_db_engine, get_connection_provider
from app.main import app

NEW_PRODUCT = {
    "name": "Lamp",
    "price": "19.99",
    "categoryId": 3,
    "description": "Desk lamp",
    "color": "white",
    "stock": 2,
    "featured": False,
    "imageUrl": "lamp.jpg",
}


def test_list_products(client, catalogue):
    res = client.get("/products")
    assert res.status_code == 200
    names = [p["name"] for p in res.json()]
    assert names == ["Cable", "Headphones", "Scarf"]


def test_search_by_category_and_min_price(client, catalogue):
    res = client.get("/products", params={"cat": 3, "minPrice": "10.00"})
    assert res.status_code == 200
    body = res.json()
    assert [p["name"] for p in body] == ["Headphones"]
    assert body[0]["price"] == 15.0
    assert body[0]["categoryId"] == 3


def test_search_color_and_max_price(client, catalogue):
    res = client.get("/products", params={"color": "red", "maxPrice": "18"})
    assert [p["name"] for p in res.json()] == ["Headphones"]


def test_search_empty_color_is_ignored(client, catalogue):
    res = client.get("/products", params={"color": ""})
    assert len(res.json()) == 3


def test_get_product(client, catalogue):
    pid = catalogue[2].product_id
    res = client.get(f"/products/{pid}")
    assert res.status_code == 200
    body = res.json()
    assert body["productId"] == pid
    assert body["featured"] is True
    assert body["imageUrl"] is None


def test_get_missing_product(client):
    res = client.get("/products/999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Product not found."


def test_create_product_as_admin(client, catalogue, admin_headers):
    res = client.post("/products", json=NEW_PRODUCT, headers=admin_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["productId"] is not None
    assert body["price"] == 19.99
    fetched = client.get(f"/products/{body['productId']}").json()
    assert fetched == body


def test_create_product_requires_admin(client, catalogue, user_headers):
    assert client.post("/products", json=NEW_PRODUCT).status_code == 401
    assert client.post("/products", json=NEW_PRODUCT, headers=user_headers).status_code == 403


def test_invalid_token_rejected(client, catalogue):
    headers = {"Authorization": "Bearer not-a-token"}
    assert client.post("/products", json=NEW_PRODUCT, headers=headers).status_code == 401


def test_update_product(client, catalogue, admin_headers):
    pid = catalogue[0].product_id
    payload = dict(NEW_PRODUCT, name="Long Cable", stock=0)
    res = client.put(f"/products/{pid}", json=payload, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["name"] == "Long Cable"
    assert client.get(f"/products/{pid}").json()["stock"] == 0


def test_update_missing_product_fails(client, catalogue, admin_headers):
    res = client.put("/products/999", json=NEW_PRODUCT, headers=admin_headers)
    assert res.status_code == 500
    assert res.json()["detail"] == "Error updating product."


def test_delete_product(client, catalogue, admin_headers):
    pid = catalogue[1].product_id
    res = client.delete(f"/products/{pid}", headers=admin_headers)
    assert res.status_code == 204
    assert client.get(f"/products/{pid}").status_code == 404
    assert client.delete(f"/products/{pid}", headers=admin_headers).status_code == 404


def test_storage_failure_does_not_leak(tmp_path):
    # schema never created, so every query fails
    engine = create_db_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    app.dependency_overrides[get_connection_provider] = lambda: ConnectionProvider(engine)
    try:
        res = TestClient(app).get("/products")
        assert res.status_code == 500
        assert res.json() == {"detail": "Error retrieving products."}
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


def test_price_is_a_json_number(client, catalogue):
    res = client.get(f"/products/{catalogue[0].product_id}")
    assert '"price":5.0' in res.text
    assert isinstance(res.json()["price"], float)


def test_create_product_snake_case_payload(client, catalogue, admin_headers):
    payload = {
        "name": "Mug",
        "price": 8.5,
        "category_id": 4,
        "description": "Ceramic",
        "color": "blue",
        "stock": 12,
        "featured": True,
        "image_url": "mug.jpg",
    }
    res = client.post("/products", json=payload, headers=admin_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["categoryId"] == 4
    assert body["imageUrl"] == "mug.jpg"
    assert body["price"] == 8.5


def test_oversized_id_is_a_clean_server_error(client, catalogue):
    res = client.get(f"/products/{10**20}")
    assert res.status_code == 500
    assert res.json() == {"detail": "Error retrieving product."}

    res = client.get("/products", params={"cat": 10**20})
    assert res.status_code == 500
    assert res.json() == {"detail": "Error retrieving products."}
