"""
Translate errors raised by PostgREST / database triggers into HTTP errors.

The gym rules (trainer capacity, unique emails, foreign keys) live in the
database; the API only decides which status code the caller sees.
"""

import logging
from fastapi import HTTPException

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
RAISE_EXCEPTION = "P0001"

# Hard limit enforced by the check_trainer_availability trigger
TRAINER_CAPACITY = 10
TRAINER_CAPACITY_MESSAGE = "Trainer has reached maximum client capacity"


def _error_parts(exc: Exception):
    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None) or str(exc)
    return (str(code) if code is not None else None), message


def to_http_exception(exc: Exception, default_detail: str = None) -> HTTPException:
    """Map an SDK/database exception to an HTTPException"""
    if isinstance(exc, HTTPException):
        return exc
    code, message = _error_parts(exc)
    if "maximum client capacity" in message.lower():
        return HTTPException(status_code=409, detail=TRAINER_CAPACITY_MESSAGE)
    if code == UNIQUE_VIOLATION or "duplicate key" in message.lower():
        return HTTPException(status_code=409, detail="Record already exists")
    if code == FOREIGN_KEY_VIOLATION:
        return HTTPException(status_code=404, detail="Referenced record not found")
    if code == CHECK_VIOLATION:
        return HTTPException(status_code=400, detail=message)
    if code == RAISE_EXCEPTION:
        return HTTPException(status_code=400, detail=message)
    logger.error(f"Database error: {message}")
    return HTTPException(status_code=500, detail=default_detail or message)
