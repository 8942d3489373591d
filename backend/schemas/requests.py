"""Request body models for PathStore API."""

from typing import Optional

from pydantic import Base64Bytes, BaseModel


class ValueWrite(BaseModel):
    """JSON write body. "data" is optional base64-encoded binary payload."""
    content: str = ""
    content_type: str = ""
    data: Optional[Base64Bytes] = None
