"""
Timezone-aware timestamp columns shared by the models
"""

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_column(index: bool = False, nullable: bool = False) -> Column:
    """A new ``TIMESTAMP WITH TIME ZONE`` column; each model field needs its own instance"""
    return Column(DateTime(timezone=True), index=index, nullable=nullable)
