"""
API schemas for Category, Product and MenuItem
"""

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from datetime import datetime
from typing import Annotated, ClassVar, List, Optional
import uuid

from storefront.core.validation import HttpUrlStr
from storefront.models.product import BadgeColor
from storefront.schemas.base import ReadSchema, UpdateSchema

CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
ProductTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
ProductDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
MenuItemName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
MenuItemDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=300)]
BadgeLabel = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]

# Largest value a Numeric(10, 2) price column holds
MAX_PRICE = 99999999.99

# ============================================================================
# Category Schemas
# ============================================================================

class CategoryCreate(BaseModel):
    name: CategoryName


class CategoryUpdate(UpdateSchema):
    name: Optional[CategoryName] = None


class CategoryRead(ReadSchema):
    id: uuid.UUID
    name: str
    created_at: datetime


# ============================================================================
# Product Schemas
# ============================================================================

class ProductCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: ProductTitle
    description: ProductDescription
    main_image_url: HttpUrlStr
    gallery_image_urls: List[HttpUrlStr] = Field(default_factory=list, max_length=12)
    badge_text: Optional[BadgeLabel] = None
    badge_color: Optional[BadgeColor] = None
    badge_icon: Optional[BadgeLabel] = None
    category_id: Optional[uuid.UUID] = None


class ProductUpdate(UpdateSchema):
    model_config = ConfigDict(use_enum_values=True)
    nullable_fields: ClassVar[tuple[str, ...]] = ("badge_text", "badge_color", "badge_icon", "category_id")

    title: Optional[ProductTitle] = None
    description: Optional[ProductDescription] = None
    main_image_url: Optional[HttpUrlStr] = None
    gallery_image_urls: Optional[List[HttpUrlStr]] = Field(None, max_length=12)
    badge_text: Optional[BadgeLabel] = None
    badge_color: Optional[BadgeColor] = None
    badge_icon: Optional[BadgeLabel] = None
    category_id: Optional[uuid.UUID] = None


class ProductRead(ReadSchema):
    id: uuid.UUID
    title: str
    description: str
    main_image_url: str
    gallery_image_urls: List[str]
    badge_text: Optional[str] = None
    badge_color: Optional[str] = None
    badge_icon: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


# ============================================================================
# Menu Item Schemas
# ============================================================================

class MenuItemCreate(BaseModel):
    name: MenuItemName
    description: MenuItemDescription
    price: float = Field(..., gt=0, ge=0.01, le=MAX_PRICE)
    product_id: Optional[uuid.UUID] = None
    category_id: Optional[uuid.UUID] = None


class MenuItemUpdate(UpdateSchema):
    nullable_fields: ClassVar[tuple[str, ...]] = ("product_id", "category_id")

    name: Optional[MenuItemName] = None
    description: Optional[MenuItemDescription] = None
    price: Optional[float] = Field(None, gt=0, ge=0.01, le=MAX_PRICE)
    product_id: Optional[uuid.UUID] = None
    category_id: Optional[uuid.UUID] = None


class MenuItemRead(ReadSchema):
    id: uuid.UUID
    name: str
    description: str
    price: float
    product_id: Optional[uuid.UUID] = None
    category_id: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


# ============================================================================
# Responses with relations
# ============================================================================

class CategoryDetail(CategoryRead):
    products: List[ProductRead] = []
    menu_items: List[MenuItemRead] = []


class ProductDetail(ProductRead):
    category: Optional[CategoryRead] = None
    menu_items: List[MenuItemRead] = []


class MenuItemDetail(MenuItemRead):
    product: Optional[ProductRead] = None
    category: Optional[CategoryRead] = None
