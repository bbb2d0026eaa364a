"""
Category model grouping products and menu items
"""

from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from storefront.models.timestamps import timestamp_column, utc_now

if TYPE_CHECKING:
    from storefront.models.product import Product
    from storefront.models.menu_item import MenuItem


class Category(SQLModel, table=True):
    """Named grouping shown as a tab in the menu and product carousel"""

    __tablename__ = "categories"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=50, unique=True, index=True, description="Category name")

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

    # Relationships
    products: list["Product"] = Relationship(back_populates="category")
    menu_items: list["MenuItem"] = Relationship(back_populates="category")
