"""
Tests for image uploads and the storage service
"""

from fastapi import status
from unittest.mock import MagicMock, patch
import pytest
import re

from storefront.services import storage_service
from storefront.services.storage_service import StorageUploadError


def test_upload_returns_url_and_path(client):
    with patch.object(
        storage_service,
        "upload_image",
        return_value=("https://storage.example.com/products/1-abc.jpg", "products/1-abc.jpg"),
    ) as upload:
        response = client.post(
            "/api/upload",
            files={"file": ("cake.jpg", b"image-bytes", "image/jpeg")},
        )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "url": "https://storage.example.com/products/1-abc.jpg",
        "path": "products/1-abc.jpg",
    }
    upload.assert_called_once_with(b"image-bytes", "cake.jpg", "image/jpeg")


def test_upload_without_file(client):
    response = client.post("/api/upload")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "No file provided"}


def test_upload_storage_failure(client):
    with patch.object(storage_service, "upload_image", side_effect=StorageUploadError("bucket missing")):
        response = client.post(
            "/api/upload",
            files={"file": ("cake.jpg", b"image-bytes", "image/jpeg")},
        )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Failed to upload file"}


def test_build_object_path_keeps_extension():
    path = storage_service.build_object_path("Lemon Tart.PNG")

    assert re.fullmatch(r"products/\d+-[0-9a-f]{12}\.png", path)


def test_build_object_path_without_extension():
    assert storage_service.build_object_path("photo").endswith(".bin")


def test_upload_image_uses_bucket():
    bucket = MagicMock()
    bucket.get_public_url.return_value = "https://storage.example.com/public/file.jpg"
    client = MagicMock()
    client.storage.from_.return_value = bucket

    with patch.object(storage_service, "get_supabase_client", return_value=client):
        url, path = storage_service.upload_image(b"data", "file.jpg", "image/jpeg")

    assert url == "https://storage.example.com/public/file.jpg"
    assert path.startswith("products/") and path.endswith(".jpg")
    kwargs = bucket.upload.call_args.kwargs
    assert kwargs["path"] == path
    assert kwargs["file"] == b"data"
    assert kwargs["file_options"]["content-type"] == "image/jpeg"


def test_upload_image_wraps_storage_errors():
    bucket = MagicMock()
    bucket.upload.side_effect = RuntimeError("The resource already exists")
    client = MagicMock()
    client.storage.from_.return_value = bucket

    with patch.object(storage_service, "get_supabase_client", return_value=client):
        with pytest.raises(StorageUploadError):
            storage_service.upload_image(b"data", "file.jpg", "image/jpeg")


def test_unconfigured_storage_raises(monkeypatch):
    monkeypatch.setattr(storage_service, "_supabase_client", None)
    settings = storage_service.get_settings()
    monkeypatch.setattr(settings, "SUPABASE_URL", None)

    with pytest.raises(StorageUploadError):
        storage_service.get_supabase_client()
