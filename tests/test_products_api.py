# tests/test_products_api.py
from conftest import HEADERS

LAPTOP = {
    "id": "1",
    "name": "Laptop",
    "description": "High-performance laptop with 16GB RAM",
    "price": 1200,
    "category": "electronics",
    "inStock": True,
}


def test_welcome(client):
    r = client.get("/", headers=HEADERS)
    assert r.status_code == 200
    assert r.text == "Welcome to the Product API! Visit /api/products"


def test_list_defaults(client):
    r = client.get("/api/products", headers=HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body["page"] == 1
    assert body["total"] == 3
    assert [p["id"] for p in body["results"]] == ["1", "2", "3"]


def test_list_category_first_page(client):
    r = client.get("/api/products", params={"category": "electronics", "page": 1, "limit": 1}, headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == {"page": 1, "total": 2, "results": [LAPTOP]}


def test_list_search_and_case_insensitive_category(client):
    body = client.get("/api/products", params={"category": "Electronics", "search": "smart"}, headers=HEADERS).json()
    assert body["total"] == 1
    assert body["results"][0]["name"] == "Smartphone"


def test_list_page_beyond_range_is_empty(client):
    body = client.get("/api/products", params={"page": 5, "limit": 2}, headers=HEADERS).json()
    assert body == {"page": 5, "total": 3, "results": []}


def test_list_bad_numbers_fall_back_to_defaults(client):
    r = client.get("/api/products", params={"page": "abc", "limit": "-1"}, headers=HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body["page"] == 1
    assert len(body["results"]) == 3


def test_get_product(client):
    r = client.get("/api/products/1", headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == LAPTOP


def test_get_missing_product(client):
    r = client.get("/api/products/999", headers=HEADERS)
    assert r.status_code == 404
    assert r.json() == {"error": "NotFoundError", "message": "Product not found"}


def test_create_product_defaults_in_stock(client):
    r = client.post("/api/products", json={"name": "Desk", "price": 300, "category": "furniture"}, headers=HEADERS)
    assert r.status_code == 201
    body = r.json()
    assert body["id"]
    assert body["inStock"] is True
    assert body["description"] is None
    assert body["name"] == "Desk"
    assert body["price"] == 300


def test_create_then_fetch_round_trip(client):
    created = client.post(
        "/api/products",
        json={"name": "Lamp", "price": 25.5, "category": "home", "description": "LED", "inStock": False},
        headers=HEADERS,
    ).json()
    fetched = client.get(f"/api/products/{created['id']}", headers=HEADERS).json()
    assert fetched == created
    assert fetched["inStock"] is False


def test_created_ids_are_unique(client):
    ids = {
        client.post("/api/products", json={"name": f"P{i}", "price": i + 1, "category": "x"}, headers=HEADERS).json()["id"]
        for i in range(10)
    }
    listing = client.get("/api/products", params={"limit": 100}, headers=HEADERS).json()
    all_ids = [p["id"] for p in listing["results"]]
    assert len(ids) == 10
    assert len(all_ids) == len(set(all_ids)) == 13


def test_create_requires_name_price_category(client):
    for payload in (
        {"price": 10, "category": "x"},
        {"name": "A", "category": "x"},
        {"name": "A", "price": 10},
        {"name": "", "price": 10, "category": "x"},
        {"name": "A", "price": 0, "category": "x"},
    ):
        r = client.post("/api/products", json=payload, headers=HEADERS)
        assert r.status_code == 400
        assert r.json() == {"error": "ValidationError", "message": "Name, price, and category are required"}
    assert client.get("/api/products", headers=HEADERS).json()["total"] == 3


def test_create_without_json_body(client):
    r = client.post("/api/products", content=b"name=Desk", headers={**HEADERS, "content-type": "text/plain"})
    assert r.status_code == 400
    assert r.json()["message"] == "Name, price, and category are required"


def test_create_with_unusable_price(client):
    r = client.post("/api/products", json={"name": "A", "price": "cheap", "category": "x"}, headers=HEADERS)
    assert r.status_code == 400
    assert r.json()["error"] == "ValidationError"


def test_update_merges_fields(client):
    r = client.put("/api/products/2", json={"price": 750, "inStock": False}, headers=HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body == {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 750,
        "category": "electronics",
        "inStock": False,
    }
    assert client.get("/api/products/2", headers=HEADERS).json() == body


def test_update_never_changes_id(client):
    r = client.put("/api/products/3", json={"id": "abc", "name": "Espresso Machine"}, headers=HEADERS)
    assert r.json()["id"] == "3"
    assert client.get("/api/products/abc", headers=HEADERS).status_code == 404


def test_update_empty_payload_is_noop(client):
    before = client.get("/api/products/1", headers=HEADERS).json()
    r = client.put("/api/products/1", json={}, headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == before


def test_update_missing_product(client):
    r = client.put("/api/products/nope", json={"price": 1}, headers=HEADERS)
    assert r.status_code == 404
    assert r.json() == {"error": "NotFoundError", "message": "Product not found"}


def test_delete_product(client):
    r = client.delete("/api/products/1", headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == {"message": "Product deleted", "product": LAPTOP}
    assert client.get("/api/products/1", headers=HEADERS).status_code == 404


def test_delete_missing_is_always_404(client):
    for _ in range(3):
        r = client.delete("/api/products/nope", headers=HEADERS)
        assert r.status_code == 404
        assert r.json()["error"] == "NotFoundError"
    assert client.get("/api/products", headers=HEADERS).json()["total"] == 3


def test_stats_route_is_reachable(client):
    r = client.get("/api/products/stats", headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == {"electronics": 2, "kitchen": 1}


def test_stats_follow_catalog_changes(client):
    client.post("/api/products", json={"name": "Desk", "price": 300, "category": "furniture"}, headers=HEADERS)
    client.delete("/api/products/3", headers=HEADERS)
    assert client.get("/api/products/stats", headers=HEADERS).json() == {"electronics": 2, "furniture": 1}
