"""
Image upload endpoint backed by Supabase storage
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
import asyncio
import structlog

from storefront.core.dependencies import get_current_admin
from storefront.services import storage_service
from storefront.services.storage_service import StorageUploadError

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("", dependencies=[Depends(get_current_admin)])
async def upload_file(file: UploadFile = File(None)):
    """Store an image in the bucket and return its public URL and object path"""
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file provided"
        )

    try:
        content = await file.read()
        url, path = await asyncio.to_thread(
            storage_service.upload_image,
            content,
            file.filename,
            file.content_type,
        )
        return {"url": url, "path": path}

    except StorageUploadError as e:
        logger.error(f"Upload failed for {file.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload file"
        )
    except Exception as e:
        logger.error(f"Unexpected error uploading {file.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload file"
        )
