"""
Schemas module
"""

from storefront.schemas.catalog import (
    CategoryCreate, CategoryUpdate, CategoryRead, CategoryDetail,
    ProductCreate, ProductUpdate, ProductRead, ProductDetail,
    MenuItemCreate, MenuItemUpdate, MenuItemRead, MenuItemDetail,
)
from storefront.schemas.content import (
    FAQCreate, FAQUpdate, FAQRead,
    ImageMessageCreate, ImageMessageUpdate, ImageMessageRead,
    MiscContentCreate, MiscContentUpdate, MiscContentRead,
)
from storefront.schemas.review import (
    Review, CuratedReview, ReviewsResponse, CuratedReviewsResponse, GoogleReviewsQuery,
)
from storefront.schemas.token import AdminLogin, TokenResponse

__all__ = [
    "CategoryCreate", "CategoryUpdate", "CategoryRead", "CategoryDetail",
    "ProductCreate", "ProductUpdate", "ProductRead", "ProductDetail",
    "MenuItemCreate", "MenuItemUpdate", "MenuItemRead", "MenuItemDetail",
    "FAQCreate", "FAQUpdate", "FAQRead",
    "ImageMessageCreate", "ImageMessageUpdate", "ImageMessageRead",
    "MiscContentCreate", "MiscContentUpdate", "MiscContentRead",
    "Review", "CuratedReview", "ReviewsResponse", "CuratedReviewsResponse", "GoogleReviewsQuery",
    "AdminLogin", "TokenResponse",
]
