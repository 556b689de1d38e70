# app/core/supabase_client.py
from functools import lru_cache
from supabase import create_client, Client

from app.core.config import get_settings

settings = get_settings()


@lru_cache
def supabase_storage_client() -> Client:
    """
    Create the Supabase client used for Storage uploads.

    Uses the service role key when configured (bypasses bucket policies),
    otherwise falls back to the anon key, which requires the bucket to
    allow public inserts.

    WARNING:
      - Never expose service role key to frontend.
    """
    key = settings.SUPABASE_SERVICE_ROLE_KEY or settings.SUPABASE_KEY
    return create_client(settings.SUPABASE_URL, key)
