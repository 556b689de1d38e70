# app/schemas/upload.py
from app.schemas.base import CamelModel


class UploadRead(CamelModel):
    """
    Result of an image upload: hosted URL plus its identifier.
    """

    image_url: str
    public_id: str
