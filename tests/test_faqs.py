"""
Integration tests for the FAQ API
"""

from fastapi import status
import uuid


def test_faq_round_trip(client):
    created = client.post("/api/faqs", json={
        "question": "Do you offer gluten-free options?",
        "answer": "Yes, ask our staff for today's selection.",
    })

    assert created.status_code == status.HTTP_201_CREATED
    faq = created.json()
    assert "id" in faq
    assert "created_at" in faq

    fetched = client.get(f"/api/faqs/{faq['id']}")

    assert fetched.status_code == status.HTTP_200_OK
    assert fetched.json()["question"] == "Do you offer gluten-free options?"
    assert fetched.json()["answer"] == "Yes, ask our staff for today's selection."
    assert fetched.json()["created_at"] == faq["created_at"]


def test_list_faqs_newest_first(client):
    first = client.post("/api/faqs", json={"question": "First?", "answer": "One"}).json()
    second = client.post("/api/faqs", json={"question": "Second?", "answer": "Two"}).json()

    response = client.get("/api/faqs")

    assert [faq["id"] for faq in response.json()] == [second["id"], first["id"]]


def test_create_faq_missing_answer(client):
    response = client.post("/api/faqs", json={"question": "Open on Sundays?"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == [{"field": "answer", "message": "Answer is required"}]


def test_create_faq_question_too_long(client):
    response = client.post("/api/faqs", json={"question": "q" * 201, "answer": "a"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "question"


def test_update_faq(client):
    faq = client.post("/api/faqs", json={"question": "Delivery?", "answer": "No"}).json()

    response = client.put(f"/api/faqs/{faq['id']}", json={"answer": "For large orders"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["question"] == "Delivery?"
    assert response.json()["answer"] == "For large orders"


def test_get_faq_not_found(client):
    response = client.get(f"/api/faqs/{uuid.uuid4()}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "FAQ not found"}


def test_delete_faq(client):
    faq = client.post("/api/faqs", json={"question": "Cakes?", "answer": "Yes"}).json()

    response = client.delete(f"/api/faqs/{faq['id']}")

    assert response.json() == {"message": "FAQ deleted successfully"}
    assert client.get(f"/api/faqs/{faq['id']}").status_code == status.HTTP_404_NOT_FOUND
