"""
Customer reviews: Google Places integration plus static sample and curated sets
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import httpx
import structlog

from storefront.core.config import get_settings
from storefront.schemas.review import (
    CuratedReview,
    CuratedReviewsResponse,
    Review,
    ReviewsResponse,
)

logger = structlog.get_logger(__name__)

PLACES_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"

# Reviews with a profile photo shown ahead of the rest
MAX_REVIEWS_WITH_IMAGES = 4


class PlacesApiError(Exception):
    """Google Places returned a status other than OK or REQUEST_DENIED"""

    def __init__(self, status: str, message: Optional[str] = None):
        super().__init__(f"Google Places API error: {status}")
        self.status = status
        self.message = message or "Unknown error"


SAMPLE_REVIEWS = [
    Review(
        id="1",
        author_name="Sarah Johnson",
        author_image="https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="The sourdough bread here is absolutely incredible! Fresh every morning and the perfect texture. The staff is so friendly and the coffee is top-notch too.",
        date="2024-01-15",
    ),
    Review(
        id="2",
        author_name="Michael Chen",
        author_image="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="Best bakery in the area! Their croissants are flaky perfection and the cinnamon rolls are to die for. Highly recommend stopping by for breakfast.",
        date="2024-01-10",
    ),
    Review(
        id="3",
        author_name="Emma Davis",
        author_image="https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop&crop=face",
        rating=4,
        text="Love the cozy atmosphere and the smell of fresh bread. The sandwiches are delicious and the prices are reasonable. Great local spot!",
        date="2024-01-08",
    ),
]

# Served when the Places API denies the request (billing not enabled)
PLACES_FALLBACK = ReviewsResponse(
    overall_rating=4.8,
    total_reviews=127,
    reviews=[
        Review(
            id="sample-1",
            author_name="Sarah Johnson",
            author_image="https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
            rating=5,
            text="The sourdough bread here is absolutely incredible! Fresh every morning and the perfect texture. The staff is so friendly and the coffee is top-notch too. Highly recommend the cinnamon scrolls!",
            date="2024-01-15",
        ),
        Review(
            id="sample-2",
            author_name="Michael Chen",
            author_image="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
            rating=5,
            text="Best bakery in the area! Their croissants are flaky perfection and the cinnamon rolls are to die for. The coffee pairs perfectly with their pastries. Highly recommend stopping by for breakfast.",
            date="2024-01-10",
        ),
        Review(
            id="sample-3",
            author_name="Emma Davis",
            author_image="https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop&crop=face",
            rating=4,
            text="Love the cozy atmosphere and the smell of fresh bread. The sandwiches are delicious and the prices are reasonable. Great local spot with authentic flavors!",
            date="2024-01-08",
        ),
        Review(
            id="sample-4",
            author_name="David Wilson",
            author_image="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
            rating=5,
            text="Amazing pastries and the coffee is excellent. The staff remembers my order and always has a smile. This place makes my mornings special. The sourdough is my favorite!",
            date="2024-01-05",
        ),
        Review(
            id="sample-5",
            author_name="Lisa Thompson",
            author_image="https://images.unsplash.com/photo-1544005313-94ddf0286df2?w=150&h=150&fit=crop&crop=face",
            rating=5,
            text="The bread selection is fantastic and everything tastes homemade. The sourdough is my favorite - crusty outside, soft inside. Perfect! The staff is so welcoming too.",
            date="2024-01-03",
        ),
        Review(
            id="sample-6",
            author_name="James Brown",
            author_image="https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=150&h=150&fit=crop&crop=face",
            rating=4,
            text="Great local bakery with authentic flavors. The croissants are buttery and flaky, and the coffee pairs perfectly. Will definitely be back! Love the atmosphere.",
            date="2024-01-01",
        ),
    ],
)

CURATED_REVIEWS = [
    CuratedReview(
        id="curated-1",
        author_name="Yehsey Om",
        author_image="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="Always perfect and delicious! The best cake in Busselton, moist, fresh, and exactly what I expect every time. And the price is reasonable. Highly recommended!",
        date="2024-01-10",
        source="google",
    ),
    CuratedReview(
        id="curated-2",
        author_name="Dianne Boardman",
        author_image="https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="I absolutely love their coffee eclairs, best I've ever had, with real cream.",
        date="2024-01-08",
        source="google",
    ),
    CuratedReview(
        id="curated-3",
        author_name="Emily Taylor",
        author_image="https://images.unsplash.com/photo-1544005313-94ddf0286df2?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="Workers were so nice and helpful food was very good and delicious and was cooked properly overall amazing I recommend going to this place if you are just on a quick grab and go",
        date="2024-01-05",
        source="google",
    ),
    CuratedReview(
        id="curated-4",
        author_name="James Close",
        author_image="https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="Beautiful bakery owned by a family. Reasonable prices and a wide variety of products! They also have delicious coffee! Well done guys! All the best",
        date="2024-01-03",
        source="google",
    ),
    CuratedReview(
        id="curated-5",
        author_name="Sarah Johnson",
        author_image="https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="The sourdough bread here is absolutely incredible! Fresh every morning and the perfect texture. The staff is so friendly and the coffee is top-notch too.",
        date="2024-01-15",
        source="manual",
    ),
    CuratedReview(
        id="curated-6",
        author_name="Michael Chen",
        author_image="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
        rating=5,
        text="Best bakery in the area! Their croissants are flaky perfection and the cinnamon rolls are to die for. Highly recommend stopping by for breakfast.",
        date="2024-01-10",
        source="manual",
    ),
]

# Total shown on the public Google listing
CURATED_TOTAL_REVIEWS = 163


def average_rating(reviews: List[Review]) -> float:
    """Mean rating rounded to one decimal place"""
    if not reviews:
        return 0.0
    return round(sum(review.rating for review in reviews) / len(reviews), 1)


def get_sample_reviews() -> ReviewsResponse:
    return ReviewsResponse(
        overall_rating=average_rating(SAMPLE_REVIEWS),
        total_reviews=len(SAMPLE_REVIEWS),
        reviews=SAMPLE_REVIEWS,
    )


def get_curated_reviews() -> CuratedReviewsResponse:
    return CuratedReviewsResponse(
        overall_rating=average_rating(CURATED_REVIEWS),
        total_reviews=CURATED_TOTAL_REVIEWS,
        reviews=CURATED_REVIEWS,
    )


def select_reviews(
    raw_reviews: List[Dict[str, Any]],
    max_reviews: int = 6,
    min_rating: int = 0,
    require_images: bool = False,
    min_length: int = 20,
) -> List[Review]:
    """
    Pick which Google reviews to show.

    Filters by rating and text length, then either keeps only reviews with a
    profile photo (``require_images``) or puts up to four photo reviews
    first and fills the rest with the others. Ids reflect the position in
    Google's list.
    """
    candidates = []
    for index, raw in enumerate(raw_reviews):
        text = raw.get("text") or ""
        photo = raw.get("profile_photo_url")
        candidates.append({
            "review": Review(
                id=f"review-{index}",
                author_name=raw.get("author_name", "Anonymous"),
                author_image=photo,
                rating=int(raw.get("rating", 0)),
                text=text,
                date=datetime.fromtimestamp(raw.get("time", 0), tz=timezone.utc).date().isoformat(),
            ),
            "has_image": bool(photo),
            "length": len(text),
        })

    if min_rating > 0:
        candidates = [c for c in candidates if c["review"].rating >= min_rating]

    candidates = [c for c in candidates if c["length"] >= min_length]

    if require_images:
        candidates = [c for c in candidates if c["has_image"]]
    else:
        with_images = [c for c in candidates if c["has_image"]]
        without_images = [c for c in candidates if not c["has_image"]]
        take_with = min(MAX_REVIEWS_WITH_IMAGES, len(with_images))
        take_without = max(max_reviews - take_with, 0)
        candidates = with_images[:take_with] + without_images[:take_without]

    return [c["review"] for c in candidates[:max_reviews]]


async def fetch_google_reviews(
    place_id: str,
    api_key: str,
    max_reviews: int = 6,
    min_rating: int = 0,
    require_images: bool = False,
    min_length: int = 20,
    client: Optional[httpx.AsyncClient] = None,
) -> ReviewsResponse:
    """
    Fetch place details from Google Places and shape them into a ReviewsResponse.

    A REQUEST_DENIED status (billing not enabled) yields the static sample
    set. Any other non-OK status raises PlacesApiError; transport failures
    propagate as httpx errors.
    """
    settings = get_settings()
    params = {
        "place_id": place_id,
        "fields": "rating,user_ratings_total,reviews",
        "reviews_sort": "most_relevant",
        "reviews_no_translations": "true",
        "key": api_key,
    }

    logger.info(f"Fetching Google reviews for place {place_id}")

    if client is None:
        async with httpx.AsyncClient(timeout=settings.GOOGLE_PLACES_TIMEOUT) as own_client:
            response = await own_client.get(PLACES_DETAILS_URL, params=params)
    else:
        response = await client.get(PLACES_DETAILS_URL, params=params)

    response.raise_for_status()
    data = response.json()
    status = data.get("status")

    if status == "REQUEST_DENIED":
        logger.info("Google Places request denied, returning sample reviews")
        return PLACES_FALLBACK

    if status != "OK":
        raise PlacesApiError(status or "UNKNOWN", data.get("error_message"))

    place = data.get("result", {})
    reviews = select_reviews(
        place.get("reviews") or [],
        max_reviews=max_reviews,
        min_rating=min_rating,
        require_images=require_images,
        min_length=min_length,
    )

    logger.info(f"Returning {len(reviews)} Google reviews for place {place_id}")
    return ReviewsResponse(
        overall_rating=place.get("rating") or 0,
        total_reviews=place.get("user_ratings_total") or 0,
        reviews=reviews,
    )
