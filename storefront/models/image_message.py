"""
Image message model used by the "our story" gallery
"""

from sqlmodel import Field, SQLModel
from datetime import datetime
import uuid

from storefront.models.timestamps import timestamp_column, utc_now


class ImageMessage(SQLModel, table=True):
    """An image with a short caption and icon"""

    __tablename__ = "image_messages"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    image_url: str = Field(max_length=1000, nullable=False)
    message: str = Field(max_length=500, nullable=False)
    icon: str = Field(max_length=50, nullable=False)
    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column(index=True))
