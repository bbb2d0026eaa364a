"""
Supabase storage uploads for admin images
"""

from supabase import create_client, Client
from typing import Optional, Tuple
import structlog
import time
import uuid

from storefront.core.config import get_settings

logger = structlog.get_logger(__name__)

# Don't initialize at module level
_supabase_client: Optional[Client] = None


class StorageUploadError(Exception):
    """Raised when the storage bucket rejects an upload"""


def get_supabase_client() -> Client:
    """Get or create the Supabase client"""
    global _supabase_client

    if _supabase_client is None:
        settings = get_settings()
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            logger.error("Supabase credentials not found in environment variables")
            raise StorageUploadError("Storage is not configured")

        _supabase_client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
        logger.info("Initialized Supabase client")

    return _supabase_client


def build_object_path(filename: str) -> str:
    """Unique object key under products/, keeping the file extension"""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
    return f"products/{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}.{ext}"


def _public_url(response) -> Optional[str]:
    """Extract the URL from get_public_url, which returns a str or a dict depending on version"""
    if isinstance(response, str):
        return response
    if isinstance(response, dict):
        data = response.get("data", response)
        return data.get("publicUrl") or data.get("public_url") or data.get("publicURL")
    return None


def upload_image(content: bytes, filename: str, content_type: Optional[str] = None) -> Tuple[str, str]:
    """Upload bytes to the image bucket and return ``(public_url, path)``"""
    settings = get_settings()
    bucket = get_supabase_client().storage.from_(settings.SUPABASE_BUCKET_NAME)
    path = build_object_path(filename)

    try:
        bucket.upload(
            path=path,
            file=content,
            file_options={
                "content-type": content_type or "application/octet-stream",
                "cache-control": "3600",
                "upsert": "false",  # Must be string, not boolean
            },
        )
    except Exception as e:
        logger.error(f"Error uploading {filename} to storage: {e}")
        raise StorageUploadError(str(e)) from e

    url = _public_url(bucket.get_public_url(path))
    if not url:
        raise StorageUploadError("Storage did not return a public URL")

    logger.info(f"Uploaded image to {path}")
    return url, path
