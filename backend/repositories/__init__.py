"""Persistence layer: path store, value codec and store errors."""

from .codec import DEFAULT_BINARY_TYPE, StoredValue, decode, encode
from .errors import (
    DecodingError,
    EncodingError,
    EngineReadError,
    EngineWriteError,
    NotFound,
    StoreClosedError,
    StoreError,
    StoreOpenError,
    ValidationError,
)
from .path_store import PathStore

__all__ = [
    "DEFAULT_BINARY_TYPE",
    "StoredValue",
    "encode",
    "decode",
    "PathStore",
    "StoreError",
    "NotFound",
    "ValidationError",
    "EncodingError",
    "DecodingError",
    "EngineReadError",
    "EngineWriteError",
    "StoreOpenError",
    "StoreClosedError",
]
