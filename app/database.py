# app/database.py
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Postgres (Supabase pooler):
#   - sslmode=require   : enforce SSL when running in the cloud
#   - pool_size=1       : keep only 1 connection to the pooler
#   - max_overflow=0    : do not open extra connections beyond the pool
#
# SQLite (local dev):
#   - check_same_thread=False so FastAPI's threadpool can share it
# ---------------------------------------------------------

db_url = settings.DATABASE_URL

engine_options: dict = {
    "echo": False,  # set to True if you want to debug SQL queries
    "pool_pre_ping": True,
}

if db_url.startswith("postgres"):
    # Append sslmode=require if it is not already present
    if "sslmode=" not in db_url:
        if "?" in db_url:
            db_url = db_url + "&sslmode=require"
        else:
            db_url = db_url + "?sslmode=require"
    engine_options.update(pool_size=1, max_overflow=0)
elif db_url.startswith("sqlite"):
    engine_options["connect_args"] = {"check_same_thread": False}

engine = create_engine(db_url, **engine_options)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
