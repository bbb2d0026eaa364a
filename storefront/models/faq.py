"""
FAQ model
"""

from sqlmodel import Field, SQLModel
from datetime import datetime
import uuid

from storefront.models.timestamps import timestamp_column, utc_now


class FAQ(SQLModel, table=True):
    """Question and answer pair shown in the FAQ accordion"""

    __tablename__ = "faqs"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    question: str = Field(max_length=200, nullable=False)
    answer: str = Field(max_length=1000, nullable=False)
    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column(index=True))
