"""
FAQ API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.faq import FAQ
from storefront.schemas.content import FAQCreate, FAQUpdate, FAQRead
from storefront.services import faq_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_faq_or_404(session: Session, faq_id: uuid.UUID) -> FAQ:
    faq = faq_service.get_by_id(session, faq_id)
    if not faq:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="FAQ not found"
        )
    return faq


@router.get("", response_model=List[FAQRead])
def list_faqs(session: Session = Depends(get_session)):
    """List FAQs, newest first"""
    try:
        return faq_service.get_all(session)

    except Exception as e:
        logger.error(f"Error listing FAQs: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch FAQs"
        )


@router.post(
    "",
    response_model=FAQRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_faq(
    faq_data: FAQCreate,
    session: Session = Depends(get_session)
):
    """Create a new FAQ"""
    try:
        return faq_service.create(session, faq_data)

    except Exception as e:
        session.rollback()
        logger.error(f"Error creating FAQ: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create FAQ"
        )


@router.get("/{faq_id}", response_model=FAQRead)
def get_faq(
    faq_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Get a specific FAQ"""
    try:
        return _get_faq_or_404(session, faq_id)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting FAQ: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch FAQ"
        )


@router.put(
    "/{faq_id}",
    response_model=FAQRead,
    dependencies=[Depends(get_current_admin)],
)
def update_faq(
    faq_id: uuid.UUID,
    faq_data: FAQUpdate,
    session: Session = Depends(get_session)
):
    """Update a FAQ's question and/or answer"""
    try:
        faq = _get_faq_or_404(session, faq_id)
        return faq_service.update(session, faq, faq_data)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating FAQ: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update FAQ"
        )


@router.delete("/{faq_id}", dependencies=[Depends(get_current_admin)])
def delete_faq(
    faq_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Delete a FAQ"""
    try:
        faq = _get_faq_or_404(session, faq_id)
        faq_service.delete(session, faq)
        return {"message": "FAQ deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting FAQ: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete FAQ"
        )
