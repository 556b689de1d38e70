# app/core/storage_utils.py
import time

from app.core.config import get_settings
from app.core.supabase_client import supabase_storage_client

settings = get_settings()


def upload_to_storage(path: str, file_bytes: bytes, content_type: str) -> str:
    """
    Upload raw bytes to Supabase Storage and return a public URL.

    If a file already exists at this path, it will be overwritten
    thanks to the 'upsert' option.

    Args:
        path: Full object path inside the bucket.
              Example: "computer-accessories/product-1718000000000.png"
        file_bytes: File content in bytes.
        content_type: MIME type stored with the object.

    Raises:
        Any exception raised by Supabase client if upload fails.
    """
    bucket = supabase_storage_client().storage.from_(settings.STORAGE_BUCKET)
    bucket.upload(path, file_bytes, {"content-type": content_type, "upsert": "true"})
    return bucket.get_public_url(path)


def generate_public_id(folder: str) -> str:
    """
    Build a time-based identifier for a product image.

    Example:
        generate_public_id("computer-accessories")
        -> "computer-accessories/product-1718000000000"
    """
    return f"{folder}/product-{int(time.time() * 1000)}"
