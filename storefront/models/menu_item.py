"""
Menu item model for the full menu
"""

from sqlmodel import Field, SQLModel, Relationship
from decimal import Decimal
from datetime import datetime
from typing import Optional, TYPE_CHECKING
import uuid

from storefront.models.timestamps import timestamp_column, utc_now

if TYPE_CHECKING:
    from storefront.models.category import Category
    from storefront.models.product import Product


class MenuItem(SQLModel, table=True):
    """Priced line item, optionally tied to a product and/or category"""

    __tablename__ = "menu_items"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    product_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="products.id",
        index=True,
        description="Product this item is a variant of"
    )
    category_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="categories.id",
        index=True,
        description="Category this item is listed under"
    )

    # Item details
    name: str = Field(max_length=100, nullable=False, description="Item name")
    description: str = Field(max_length=300, nullable=False, description="Item description")

    # Pricing
    price: Decimal = Field(
        max_digits=10,
        decimal_places=2,
        description="Price of item"
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: Optional[datetime] = Field(default=None, sa_column=timestamp_column(nullable=True))

    # Relationships
    product: Optional["Product"] = Relationship(back_populates="menu_items")
    category: Optional["Category"] = Relationship(back_populates="menu_items")
