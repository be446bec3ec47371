"""Shared utilities for service layer."""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreFailureError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def store_guard(db: Session, message: str) -> Iterator[None]:
    """
    Turn database failures inside the block into StoreFailureError.

    The session is rolled back so the request's session stays usable.

    Args:
        db: Database session
        message: Human-readable prefix for the error, e.g. "Error fetching members"
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("store_failure", action=message, error=str(exc))
        raise StoreFailureError(f"{message}: {exc}") from exc
