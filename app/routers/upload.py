# app/routers/upload.py
from fastapi import APIRouter, File, HTTPException, UploadFile, status

from app.schemas.upload import UploadRead
from app.services.upload_service import UploadService

router = APIRouter(prefix="/upload", tags=["Upload"])

service = UploadService()


@router.post(
    "",
    response_model=UploadRead,
    summary="Upload a product image",
)
def upload_image(file: UploadFile | None = File(default=None)):
    """
    Upload one image to Storage.

    - Accepts JPEG, PNG, WEBP, GIF.
    - Returns the public URL and its identifier.
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file provided",
        )

    # One byte past the limit is enough to reject an oversized file.
    file_bytes = file.file.read(service.max_bytes + 1)
    return service.upload_image(file.content_type, file_bytes)
