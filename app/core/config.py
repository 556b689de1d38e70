# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres or SQLite connection string)
      - SUPABASE_URL
      - SUPABASE_KEY (anon key)

    Optional:
      - SUPABASE_SERVICE_ROLE_KEY (preferred for Storage uploads)
      - STOREFRONT_API_URL / CART_STORAGE_FILE (storefront client side)
    """

    PROJECT_NAME: str = "Darimac Storefront API"
    API_PREFIX: str = "/api"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Database
    DATABASE_URL: str

    # Supabase Storage (product images)
    SUPABASE_URL: str
    SUPABASE_KEY: str
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    STORAGE_BUCKET: str = "assets"
    STORAGE_FOLDER: str = "computer-accessories"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Storefront client side
    STOREFRONT_API_URL: str = "http://localhost:8000"
    CART_STORAGE_FILE: str = ".darimac_cart.json"
    CART_STORAGE_KEY: str = "darimac-cart"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
