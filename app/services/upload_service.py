# app/services/upload_service.py
import logging

from fastapi import HTTPException, status

from app.core.config import get_settings
from app.core.storage_utils import generate_public_id, upload_to_storage
from app.schemas.upload import UploadRead

logger = logging.getLogger(__name__)

settings = get_settings()

# --- Image config ---

ALLOWED_IMAGE_CONTENT_TYPES: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class UploadService:
    """
    Product image uploads to Supabase Storage.

    Objects are stored as `<STORAGE_FOLDER>/product-<epoch ms>.<ext>`;
    the returned `public_id` is that path without the extension.
    """

    def __init__(self, folder: str | None = None, max_bytes: int | None = None):
        self.folder = folder or settings.STORAGE_FOLDER
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES

    def _validate_and_get_ext(self, content_type: str | None, file_bytes: bytes) -> str:
        if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unsupported image type. Allowed: JPEG, PNG, WEBP, GIF.",
            )

        if len(file_bytes) > self.max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Image too large (max {self.max_bytes // (1024 * 1024)}MB).",
            )

        return ALLOWED_IMAGE_CONTENT_TYPES[content_type]

    def upload_image(self, content_type: str | None, file_bytes: bytes) -> UploadRead:
        ext = self._validate_and_get_ext(content_type, file_bytes)
        public_id = generate_public_id(self.folder)

        try:
            url = upload_to_storage(f"{public_id}.{ext}", file_bytes, content_type)
        except Exception as e:
            logger.error(f"Storage upload error: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"message": "Failed to upload image", "details": str(e)},
            ) from e

        logger.info(f"Uploaded image {public_id}")
        return UploadRead(image_url=url, public_id=public_id)
