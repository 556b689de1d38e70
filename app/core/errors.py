# app/core/errors.py
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

logger = logging.getLogger(__name__)


@contextmanager
def persistence_guard(session: Session, action: str) -> Iterator[None]:
    """
    Turn database failures inside a write into a 500 response.

    The session is rolled back so nothing from a partial write is committed
    (e.g. an order header whose items failed to insert).

    Usage:

        with persistence_guard(session, "create order"):
            ...
            session.commit()
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Failed to {action}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": f"Failed to {action}", "details": str(e)},
        ) from e
