"""Shared helpers for API routes (error mapping, success payloads)."""

import logging

from fastapi import HTTPException

from repositories import EncodingError, NotFound, StoreError, ValidationError

logger = logging.getLogger(__name__)


def store_http_error(e: StoreError, fallback: str) -> HTTPException:
    """Translate a store failure into the HTTPException the route should raise."""
    if isinstance(e, NotFound):
        return HTTPException(404, e.message)
    if isinstance(e, (EncodingError, ValidationError)):
        return HTTPException(400, e.message)
    logger.error("Store error (%s): %s", e.code, e.message)
    return HTTPException(500, fallback)


def success(message: str, **extra) -> dict:
    return {"status": "success", "message": message, **extra}


def is_header_value(value: str) -> bool:
    """True if value can be sent as an HTTP header value (latin-1, no control characters)."""
    try:
        value.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return not any((ord(c) < 0x20 and c != "\t") or ord(c) == 0x7F for c in value)
