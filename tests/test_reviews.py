"""
Tests for review selection, the Google Places client and the review endpoints
"""

from fastapi import status
from unittest.mock import AsyncMock, patch
import httpx
import pytest

from storefront.api import reviews as reviews_api
from storefront.core.config import get_settings
from storefront.schemas.review import Review, ReviewsResponse
from storefront.services import reviews_service
from storefront.services.reviews_service import PlacesApiError, fetch_google_reviews, select_reviews


def _raw(author, rating=5, text="Lovely pastries and great coffee every time", photo=None, time=1704067200):
    review = {"author_name": author, "rating": rating, "text": text, "time": time}
    if photo:
        review["profile_photo_url"] = photo
    return review


def test_select_reviews_filters_by_rating_and_length():
    raw = [
        _raw("A", rating=5),
        _raw("B", rating=3),
        _raw("C", rating=5, text="Too short"),
    ]

    reviews = select_reviews(raw, min_rating=4)

    assert [r.author_name for r in reviews] == ["A"]
    assert reviews[0].id == "review-0"
    assert reviews[0].date == "2024-01-01"


def test_select_reviews_prefers_photos():
    raw = [_raw(f"plain-{i}") for i in range(4)] + [_raw(f"photo-{i}", photo="https://p/x.jpg") for i in range(5)]

    reviews = select_reviews(raw, max_reviews=6)

    names = [r.author_name for r in reviews]
    assert names == ["photo-0", "photo-1", "photo-2", "photo-3", "plain-0", "plain-1"]


def test_select_reviews_require_images():
    raw = [_raw("plain"), _raw("photo", photo="https://p/x.jpg")]

    reviews = select_reviews(raw, require_images=True)

    assert [r.author_name for r in reviews] == ["photo"]


def test_sample_reviews_average():
    response = reviews_service.get_sample_reviews()

    assert response.total_reviews == 3
    assert response.overall_rating == 4.7


def test_curated_reviews():
    response = reviews_service.get_curated_reviews()

    assert response.total_reviews == 163
    assert response.overall_rating == 5.0
    assert {r.source for r in response.reviews} == {"google", "manual"}


def _client(payload, status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["place_id"] == "place-123"
        return httpx.Response(status_code, json=payload)
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_google_reviews_ok():
    payload = {
        "status": "OK",
        "result": {
            "rating": 4.6,
            "user_ratings_total": 210,
            "reviews": [_raw("Jo", photo="https://p/jo.jpg"), _raw("Sam", rating=2)],
        },
    }

    async with _client(payload) as client:
        response = await fetch_google_reviews("place-123", "key", min_rating=4, client=client)

    assert response.overall_rating == 4.6
    assert response.total_reviews == 210
    assert [r.author_name for r in response.reviews] == ["Jo"]


@pytest.mark.asyncio
async def test_fetch_google_reviews_request_denied_falls_back():
    async with _client({"status": "REQUEST_DENIED"}) as client:
        response = await fetch_google_reviews("place-123", "key", client=client)

    assert response.overall_rating == 4.8
    assert response.total_reviews == 127
    assert len(response.reviews) == 6


@pytest.mark.asyncio
async def test_fetch_google_reviews_error_status():
    async with _client({"status": "INVALID_REQUEST", "error_message": "Bad place"}) as client:
        with pytest.raises(PlacesApiError) as exc_info:
            await fetch_google_reviews("place-123", "key", client=client)

    assert exc_info.value.status == "INVALID_REQUEST"
    assert exc_info.value.message == "Bad place"


@pytest.mark.asyncio
async def test_fetch_google_reviews_http_error():
    async with _client({}, status_code=503) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await fetch_google_reviews("place-123", "key", client=client)


def test_reviews_endpoint(client):
    response = client.get("/api/reviews")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total_reviews"] == 3


def test_curated_reviews_endpoint(client):
    response = client.get("/api/curated-reviews")

    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()["reviews"]) == 6


def test_google_reviews_requires_place_id(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "GOOGLE_PLACE_ID", None)

    response = client.get("/api/google-reviews")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Place ID is required"}


def test_google_reviews_requires_api_key(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "GOOGLE_PLACES_API_KEY", None)

    response = client.get("/api/google-reviews", params={"place_id": "place-123"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Google Places API key is not configured"}


def test_google_reviews_rejects_bad_query(client):
    response = client.get("/api/google-reviews", params={"place_id": "p", "max_reviews": "lots"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "max_reviews"


def test_google_reviews_passes_options(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "GOOGLE_PLACES_API_KEY", "key")
    result = ReviewsResponse(
        overall_rating=4.9,
        total_reviews=10,
        reviews=[Review(id="review-0", author_name="Jo", rating=5, text="Great", date="2024-01-01")],
    )

    with patch.object(reviews_api.reviews_service, "fetch_google_reviews", AsyncMock(return_value=result)) as fetch:
        response = client.get("/api/google-reviews", params={
            "place_id": "place-123",
            "max_reviews": "3",
            "require_images": "true",
        })

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["overall_rating"] == 4.9
    fetch.assert_awaited_once_with(
        "place-123",
        "key",
        max_reviews=3,
        min_rating=0,
        require_images=True,
        min_length=20,
    )


def test_google_reviews_api_error(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "GOOGLE_PLACES_API_KEY", "key")
    error = PlacesApiError("OVER_QUERY_LIMIT", "Quota exceeded")

    with patch.object(reviews_api.reviews_service, "fetch_google_reviews", AsyncMock(side_effect=error)):
        response = client.get("/api/google-reviews", params={"place_id": "place-123"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "Google Places API error: OVER_QUERY_LIMIT",
        "details": "Quota exceeded",
    }


def test_google_reviews_accepts_large_max_reviews(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "GOOGLE_PLACES_API_KEY", "key")
    result = ReviewsResponse(overall_rating=0, total_reviews=0, reviews=[])

    with patch.object(reviews_api.reviews_service, "fetch_google_reviews", AsyncMock(return_value=result)) as fetch:
        response = client.get("/api/google-reviews", params={"place_id": "place-123", "max_reviews": "50"})

    assert response.status_code == status.HTTP_200_OK
    assert fetch.await_args.kwargs["max_reviews"] == 50


def test_google_reviews_rejects_zero_max_reviews(client):
    response = client.get("/api/google-reviews", params={"place_id": "p", "max_reviews": "0"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"][0]["field"] == "max_reviews"
