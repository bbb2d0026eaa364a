"""
Miscellaneous page content, partitioned by section
"""

from sqlmodel import Field, SQLModel
from datetime import datetime
from typing import Optional
import uuid

from storefront.models.timestamps import timestamp_column, utc_now


class MiscContent(SQLModel, table=True):
    """Generic content record for page sections such as hero, location and our-story"""

    __tablename__ = "misc_content"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    section: str = Field(max_length=50, index=True, nullable=False, description="Page section key")

    image_url: Optional[str] = Field(default=None, max_length=1000)
    icon: Optional[str] = Field(default=None, max_length=50)
    large_text: Optional[str] = Field(default=None, max_length=255)
    small_text: Optional[str] = Field(default=None, max_length=255)
    message: Optional[str] = Field(default=None, max_length=2000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column(index=True))
