"""
Customer review endpoints
"""

from fastapi import APIRouter, HTTPException, Request, status
import structlog

from storefront.core.config import get_settings
from storefront.core.validation import validate_request
from storefront.schemas.review import CuratedReviewsResponse, GoogleReviewsQuery, ReviewsResponse
from storefront.services import reviews_service
from storefront.services.reviews_service import PlacesApiError

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("/reviews", response_model=ReviewsResponse)
def get_reviews():
    """Static sample reviews with their average rating"""
    try:
        return reviews_service.get_sample_reviews()

    except Exception as e:
        logger.error(f"Error building sample reviews: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reviews"
        )


@router.get("/curated-reviews", response_model=CuratedReviewsResponse)
def get_curated_reviews():
    """Hand-picked reviews shown on the storefront"""
    try:
        return reviews_service.get_curated_reviews()

    except Exception as e:
        logger.error(f"Error building curated reviews: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch curated reviews"
        )


@router.get("/google-reviews", response_model=ReviewsResponse)
async def get_google_reviews(request: Request):
    """
    Live reviews from Google Places.

    Query parameters: ``place_id`` (falls back to GOOGLE_PLACE_ID),
    ``max_reviews``, ``min_rating``, ``require_images`` and ``min_length``.
    """
    settings = get_settings()
    query = validate_request(GoogleReviewsQuery, dict(request.query_params))

    place_id = query.place_id or settings.GOOGLE_PLACE_ID
    if not place_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Place ID is required"
        )

    if not settings.GOOGLE_PLACES_API_KEY:
        logger.error("Google Places API key is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Google Places API key is not configured"
        )

    try:
        return await reviews_service.fetch_google_reviews(
            place_id,
            settings.GOOGLE_PLACES_API_KEY,
            max_reviews=query.max_reviews,
            min_rating=query.min_rating,
            require_images=query.require_images,
            min_length=query.min_length,
        )

    except PlacesApiError as e:
        logger.error(f"Google Places returned {e.status}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": f"Google Places API error: {e.status}", "details": e.message}
        )
    except Exception as e:
        logger.error(f"Error fetching Google reviews: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch Google Reviews"
        )
