"""
Image message API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.image_message import ImageMessage
from storefront.schemas.content import ImageMessageCreate, ImageMessageUpdate, ImageMessageRead
from storefront.services import image_message_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_image_message_or_404(session: Session, image_message_id: uuid.UUID) -> ImageMessage:
    image_message = image_message_service.get_by_id(session, image_message_id)
    if not image_message:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image message not found"
        )
    return image_message


@router.get("", response_model=List[ImageMessageRead])
def list_image_messages(session: Session = Depends(get_session)):
    try:
        return image_message_service.get_all(session)

    except Exception as e:
        logger.error(f"Error listing image messages: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch image messages"
        )


@router.post(
    "",
    response_model=ImageMessageRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_image_message(
    image_message_data: ImageMessageCreate,
    session: Session = Depends(get_session)
):
    try:
        return image_message_service.create(session, image_message_data)

    except Exception as e:
        session.rollback()
        logger.error(f"Error creating image message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create image message"
        )


@router.get("/{image_message_id}", response_model=ImageMessageRead)
def get_image_message(
    image_message_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    try:
        return _get_image_message_or_404(session, image_message_id)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting image message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch image message"
        )


@router.put(
    "/{image_message_id}",
    response_model=ImageMessageRead,
    dependencies=[Depends(get_current_admin)],
)
def update_image_message(
    image_message_id: uuid.UUID,
    image_message_data: ImageMessageUpdate,
    session: Session = Depends(get_session)
):
    try:
        image_message = _get_image_message_or_404(session, image_message_id)
        return image_message_service.update(session, image_message, image_message_data)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating image message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update image message"
        )


@router.delete("/{image_message_id}", dependencies=[Depends(get_current_admin)])
def delete_image_message(
    image_message_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    try:
        image_message = _get_image_message_or_404(session, image_message_id)
        image_message_service.delete(session, image_message)
        return {"message": "Image message deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting image message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete image message"
        )
