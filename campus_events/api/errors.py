"""Translation of store faults into HTTP errors."""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


def store_fault(error: Exception, message: str) -> HTTPException:
    """
    Map an exception raised by the store to an HTTP error.

    Constraint violations (duplicate email or registration, unknown foreign
    key, deleting a row that still has dependents) become 409; anything else
    is a generic 500 that does not leak the underlying error.
    """
    if isinstance(error, IntegrityError):
        logger.warning(f"{message}: constraint violation: {error.orig}")
        return HTTPException(
            status_code=409,
            detail=f"{message}: conflicts with existing data"
        )
    logger.error(f"{message}: {error}", exc_info=error)
    return HTTPException(status_code=500, detail=message)
