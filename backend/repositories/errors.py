"""Store error family. Every store failure is a StoreError with a stable code."""

from typing import Optional


class StoreError(Exception):
    """Base for store failures with a machine-readable code."""
    code = "store_error"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(message)


class NotFound(StoreError):
    code = "not_found"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path '{path}' not found")


class ValidationError(StoreError):
    code = "validation_error"


class EncodingError(StoreError):
    code = "encoding_error"


class DecodingError(StoreError):
    code = "decoding_error"


class EngineReadError(StoreError):
    code = "engine_read_error"


class EngineWriteError(StoreError):
    code = "engine_write_error"


class StoreOpenError(StoreError):
    code = "store_open_error"


class StoreClosedError(RuntimeError):
    """Raised when an operation reaches a store that was never opened or is closed."""
