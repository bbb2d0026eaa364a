"""
Integration tests for the misc content API
"""

from fastapi import status
import pytest
import uuid


def test_create_misc_content(client):
    response = client.post("/api/misc-content", json={
        "section": "hero",
        "image_url": "https://cdn.example.com/hero.jpg",
        "large_text": "Premium Coffee",
        "small_text": "",
    })

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["section"] == "hero"
    assert data["large_text"] == "Premium Coffee"
    assert data["small_text"] is None
    assert data["message"] is None


def test_create_misc_content_requires_section(client):
    response = client.post("/api/misc-content", json={"message": "Hello"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == [{"field": "section", "message": "Section is required"}]


def test_list_misc_content_by_section(client):
    client.post("/api/misc-content", json={"section": "hero", "large_text": "Coffee"})
    client.post("/api/misc-content", json={"section": "location", "large_text": "Address"})

    everything = client.get("/api/misc-content").json()
    hero = client.get("/api/misc-content", params={"section": "hero"}).json()

    assert len(everything) == 2
    assert [item["large_text"] for item in hero] == ["Coffee"]


def test_update_misc_content_clears_optional_field(client):
    created = client.post("/api/misc-content", json={
        "section": "location",
        "icon": "clock",
        "large_text": "Opening Hours",
    }).json()

    response = client.put(f"/api/misc-content/{created['id']}", json={"icon": None})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["icon"] is None
    assert response.json()["large_text"] == "Opening Hours"


def test_update_misc_content_rejects_null_section(client):
    created = client.post("/api/misc-content", json={"section": "hero"}).json()

    response = client.put(f"/api/misc-content/{created['id']}", json={"section": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_delete_misc_content(client):
    created = client.post("/api/misc-content", json={"section": "hero"}).json()

    response = client.delete(f"/api/misc-content/{created['id']}")

    assert response.json() == {"message": "Misc content deleted successfully"}
    assert client.get(f"/api/misc-content/{created['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_get_misc_content_not_found(client):
    response = client.get(f"/api/misc-content/{uuid.uuid4()}")

    assert response.json() == {"error": "Misc content not found"}


def test_update_misc_content_blank_field_stored_as_null(client):
    created = client.post("/api/misc-content", json={
        "section": "hero",
        "large_text": "Premium Coffee",
        "small_text": "Roasted daily",
    }).json()

    response = client.put(f"/api/misc-content/{created['id']}", json={"small_text": ""})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["small_text"] is None
    assert response.json()["large_text"] == "Premium Coffee"


@pytest.mark.parametrize("field, length", [
    ("image_url", 1001),
    ("icon", 51),
    ("large_text", 256),
    ("small_text", 256),
    ("message", 2001),
])
def test_create_misc_content_rejects_long_field(client, field, length):
    response = client.post("/api/misc-content", json={"section": "hero", field: "x" * length})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == field


def test_update_misc_content_rejects_long_message(client):
    created = client.post("/api/misc-content", json={"section": "hero"}).json()

    response = client.put(f"/api/misc-content/{created['id']}", json={"message": "x" * 2001})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "message"


def test_create_misc_content_accepts_longest_message(client):
    response = client.post("/api/misc-content", json={"section": "our-story", "message": "x" * 2000})

    assert response.status_code == status.HTTP_201_CREATED
