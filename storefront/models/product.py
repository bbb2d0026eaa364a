"""
Product model for the storefront carousel
"""

from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import Column, JSON
from datetime import datetime
from enum import Enum
from typing import Optional, TYPE_CHECKING
import uuid

from storefront.models.timestamps import timestamp_column, utc_now

if TYPE_CHECKING:
    from storefront.models.category import Category
    from storefront.models.menu_item import MenuItem


class BadgeColor(str, Enum):
    """Palette a product badge may use"""
    CARAMEL = "caramel"
    SAGE = "sage"
    CHOCOLATE = "chocolate"
    BEIGE = "beige"
    CREAM = "cream"


class Product(SQLModel, table=True):
    """Featured product with imagery and an optional badge"""

    __tablename__ = "products"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    category_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="categories.id",
        index=True,
        description="Category this product is listed under"
    )

    # Product details
    title: str = Field(max_length=100, nullable=False, description="Product title")
    description: str = Field(max_length=500, nullable=False, description="Product description")

    # Images
    main_image_url: str = Field(max_length=1000, nullable=False, description="Primary image URL")
    gallery_image_urls: list[str] = Field(
        default_factory=list,
        description="Additional gallery image URLs",
        sa_column=Column(JSON, nullable=False)
    )

    # Badge (display only)
    badge_text: Optional[str] = Field(default=None, max_length=50, description="Badge label")
    badge_color: Optional[str] = Field(default=None, max_length=20, description="Badge colour, a BadgeColor value")
    badge_icon: Optional[str] = Field(default=None, max_length=50, description="Badge icon name")

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column(index=True))
    updated_at: Optional[datetime] = Field(default=None, sa_column=timestamp_column(nullable=True))

    # Relationships
    category: Optional["Category"] = Relationship(back_populates="products")
    menu_items: list["MenuItem"] = Relationship(back_populates="product")
