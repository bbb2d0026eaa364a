"""
API schemas for FAQ, ImageMessage and MiscContent
"""

from pydantic import BaseModel, StringConstraints
from datetime import datetime
from typing import Annotated, ClassVar, Optional
import uuid

from storefront.schemas.base import ReadSchema, UpdateSchema

Question = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Answer = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)]
ImageUrl = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)]
Caption = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
IconName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
SectionKey = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]

# Misc content fields are optional and may be blank; lengths match the misc_content columns
ContentImageUrl = Annotated[str, StringConstraints(max_length=1000)]
ContentIcon = Annotated[str, StringConstraints(max_length=50)]
LargeText = Annotated[str, StringConstraints(max_length=255)]
SmallText = Annotated[str, StringConstraints(max_length=255)]
ContentMessage = Annotated[str, StringConstraints(max_length=2000)]

# ============================================================================
# FAQ Schemas
# ============================================================================

class FAQCreate(BaseModel):
    question: Question
    answer: Answer


class FAQUpdate(UpdateSchema):
    question: Optional[Question] = None
    answer: Optional[Answer] = None


class FAQRead(ReadSchema):
    id: uuid.UUID
    question: str
    answer: str
    created_at: datetime


# ============================================================================
# Image Message Schemas
# ============================================================================

class ImageMessageCreate(BaseModel):
    image_url: ImageUrl
    message: Caption
    icon: IconName


class ImageMessageUpdate(UpdateSchema):
    image_url: Optional[ImageUrl] = None
    message: Optional[Caption] = None
    icon: Optional[IconName] = None


class ImageMessageRead(ReadSchema):
    id: uuid.UUID
    image_url: str
    message: str
    icon: str
    created_at: datetime


# ============================================================================
# Misc Content Schemas
# ============================================================================

class MiscContentCreate(BaseModel):
    section: SectionKey
    image_url: Optional[ContentImageUrl] = None
    icon: Optional[ContentIcon] = None
    large_text: Optional[LargeText] = None
    small_text: Optional[SmallText] = None
    message: Optional[ContentMessage] = None


class MiscContentUpdate(UpdateSchema):
    nullable_fields: ClassVar[tuple[str, ...]] = (
        "image_url", "icon", "large_text", "small_text", "message",
    )

    section: Optional[SectionKey] = None
    image_url: Optional[ContentImageUrl] = None
    icon: Optional[ContentIcon] = None
    large_text: Optional[LargeText] = None
    small_text: Optional[SmallText] = None
    message: Optional[ContentMessage] = None


class MiscContentRead(ReadSchema):
    id: uuid.UUID
    section: str
    image_url: Optional[str] = None
    icon: Optional[str] = None
    large_text: Optional[str] = None
    small_text: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime
