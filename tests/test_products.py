"""
Integration tests for the products API
"""

from fastapi import status
import pytest
import uuid

PRODUCT = {
    "title": "Sourdough Loaf",
    "description": "24-hour fermented sourdough with crispy crust",
    "main_image_url": "https://cdn.example.com/sourdough.jpg",
}


def test_create_product_minimal(client):
    response = client.post("/api/products", json=PRODUCT)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["title"] == "Sourdough Loaf"
    assert data["gallery_image_urls"] == []
    assert data["category"] is None
    assert data["badge_text"] is None


def test_create_product_with_badge_and_gallery(client, category):
    response = client.post("/api/products", json={
        **PRODUCT,
        "category_id": category["id"],
        "gallery_image_urls": ["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"],
        "badge_text": "Best Seller",
        "badge_color": "caramel",
        "badge_icon": "star",
    })

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["badge_color"] == "caramel"
    assert len(data["gallery_image_urls"]) == 2
    assert data["category"]["name"] == "Pastries"


@pytest.mark.parametrize("field, message", [
    ("title", "Title is required"),
    ("description", "Description is required"),
    ("main_image_url", "Main image url is required"),
])
def test_create_product_missing_required_field(client, field, message):
    payload = {key: value for key, value in PRODUCT.items() if key != field}

    response = client.post("/api/products", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == [{"field": field, "message": message}]


def test_create_product_keeps_urls_as_sent(client):
    response = client.post("/api/products", json={
        **PRODUCT,
        "main_image_url": "https://cdn.example.com",
        "gallery_image_urls": ["https://cdn.example.com/a b.jpg"],
    })

    assert response.status_code == status.HTTP_201_CREATED
    product_id = response.json()["id"]

    stored = client.get(f"/api/products/{product_id}").json()
    assert stored["main_image_url"] == "https://cdn.example.com"
    assert stored["gallery_image_urls"] == ["https://cdn.example.com/a b.jpg"]


def test_create_product_rejects_overlong_image_url(client):
    url = "https://cdn.example.com/" + "a" * 1000

    response = client.post("/api/products", json={**PRODUCT, "main_image_url": url})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "main_image_url"


def test_create_product_round_trips_created_at(client):
    created = client.post("/api/products", json=PRODUCT).json()

    fetched = client.get(f"/api/products/{created['id']}").json()

    assert created["created_at"]
    assert fetched["created_at"] == created["created_at"]
    assert fetched["updated_at"] is None


def test_create_product_rejects_invalid_image_url(client):
    response = client.post("/api/products", json={**PRODUCT, "main_image_url": "not a url"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "main_image_url"


def test_create_product_rejects_invalid_gallery_entry(client):
    response = client.post("/api/products", json={
        **PRODUCT,
        "gallery_image_urls": ["https://cdn.example.com/a.jpg", "nope"],
    })

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "gallery_image_urls.1"


def test_create_product_rejects_unknown_badge_color(client):
    response = client.post("/api/products", json={**PRODUCT, "badge_color": "purple"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "badge_color"


def test_create_product_unknown_category(client):
    response = client.post("/api/products", json={**PRODUCT, "category_id": str(uuid.uuid4())})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Category not found"}


def test_list_products_filters(client, category, product):
    client.post("/api/products", json=PRODUCT)

    all_products = client.get("/api/products").json()
    by_category = client.get("/api/products", params={"category_id": category["id"]}).json()
    by_search = client.get("/api/products", params={"search": "SOURDOUGH"}).json()

    assert len(all_products) == 2
    assert [p["id"] for p in by_category] == [product["id"]]
    assert [p["title"] for p in by_search] == ["Sourdough Loaf"]


def test_list_products_newest_first(client):
    first = client.post("/api/products", json=PRODUCT).json()
    second = client.post("/api/products", json={**PRODUCT, "title": "Rye Bread"}).json()

    response = client.get("/api/products")

    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


def test_get_product_not_found(client):
    response = client.get(f"/api/products/{uuid.uuid4()}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Product not found"}


def test_update_product_partial(client, product):
    response = client.put(f"/api/products/{product['id']}", json={"title": "Almond Croissant"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == "Almond Croissant"
    assert data["description"] == product["description"]
    assert data["main_image_url"] == product["main_image_url"]
    assert data["updated_at"] is not None


def test_update_product_clears_badge_and_category(client, category):
    created = client.post("/api/products", json={
        **PRODUCT,
        "category_id": category["id"],
        "badge_text": "New",
        "badge_color": "sage",
    }).json()

    response = client.put(f"/api/products/{created['id']}", json={
        "badge_text": None,
        "badge_color": None,
        "category_id": None,
    })

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["badge_text"] is None
    assert data["badge_color"] is None
    assert data["category"] is None


def test_update_product_rejects_null_title(client, product):
    response = client.put(f"/api/products/{product['id']}", json={"title": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == [{"field": "title", "message": "Title cannot be null"}]


def test_update_product_rejects_blank_description(client, product):
    response = client.put(f"/api/products/{product['id']}", json={"description": "   "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "description"


def test_delete_product_keeps_menu_items(client, product):
    item = client.post("/api/menu-items", json={
        "name": "Croissant (single)",
        "description": "One butter croissant",
        "price": 5.5,
        "product_id": product["id"],
    }).json()

    response = client.delete(f"/api/products/{product['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Product deleted successfully"}
    assert client.get(f"/api/products/{product['id']}").status_code == status.HTTP_404_NOT_FOUND

    remaining = client.get(f"/api/menu-items/{item['id']}").json()
    assert remaining["product_id"] is None
