"""
Schemas for review payloads
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class Review(BaseModel):
    id: str
    author_name: str
    author_image: Optional[str] = None
    rating: int
    text: str
    date: str


class CuratedReview(Review):
    source: Literal["google", "manual"]


class ReviewsResponse(BaseModel):
    overall_rating: float
    total_reviews: int
    reviews: List[Review]


class CuratedReviewsResponse(BaseModel):
    overall_rating: float
    total_reviews: int
    reviews: List[CuratedReview]


class GoogleReviewsQuery(BaseModel):
    """Query parameters accepted by the Google reviews endpoint"""
    place_id: Optional[str] = None
    max_reviews: int = Field(6, ge=1)
    min_rating: int = Field(0, ge=0, le=5)
    require_images: bool = False
    min_length: int = Field(20, ge=0)
