"""
Misc content API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlmodel import Session
from typing import List, Optional
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.misc_content import MiscContent
from storefront.schemas.content import MiscContentCreate, MiscContentUpdate, MiscContentRead
from storefront.services import misc_content_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_content_or_404(session: Session, content_id: uuid.UUID) -> MiscContent:
    content = misc_content_service.get_by_id(session, content_id)
    if not content:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Misc content not found"
        )
    return content


@router.get("", response_model=List[MiscContentRead])
def list_misc_content(
    section: Optional[str] = Query(None, description="Only return this page section"),
    session: Session = Depends(get_session)
):
    """List content records, newest first"""
    try:
        return misc_content_service.get_all(session, section=section)

    except Exception as e:
        logger.error(f"Error listing misc content: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch misc content"
        )


@router.post(
    "",
    response_model=MiscContentRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_misc_content(
    content_data: MiscContentCreate,
    session: Session = Depends(get_session)
):
    try:
        return misc_content_service.create(session, content_data)

    except Exception as e:
        session.rollback()
        logger.error(f"Error creating misc content: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create misc content"
        )


@router.get("/{content_id}", response_model=MiscContentRead)
def get_misc_content(
    content_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    try:
        return _get_content_or_404(session, content_id)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting misc content: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch misc content"
        )


@router.put(
    "/{content_id}",
    response_model=MiscContentRead,
    dependencies=[Depends(get_current_admin)],
)
def update_misc_content(
    content_id: uuid.UUID,
    content_data: MiscContentUpdate,
    session: Session = Depends(get_session)
):
    try:
        content = _get_content_or_404(session, content_id)
        return misc_content_service.update(session, content, content_data)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating misc content: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update misc content"
        )


@router.delete("/{content_id}", dependencies=[Depends(get_current_admin)])
def delete_misc_content(
    content_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    try:
        content = _get_content_or_404(session, content_id)
        misc_content_service.delete(session, content)
        return {"message": "Misc content deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting misc content: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete misc content"
        )
