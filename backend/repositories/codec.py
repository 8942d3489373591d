"""
Value codec for the path store.
A StoredValue is persisted as a UTF-8 JSON object:
  {"content": "...", "content_type": "...", "data": "<base64>"}
"data" is omitted when there is no binary payload and is "" when the payload is empty.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Optional

from .errors import DecodingError, EncodingError

DEFAULT_BINARY_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StoredValue:
    content: str = ""
    content_type: str = ""
    binary_data: Optional[bytes] = None

    @property
    def is_binary(self) -> bool:
        """True when a non-empty binary payload takes precedence over text."""
        return bool(self.binary_data)

    @property
    def body(self) -> bytes:
        if self.is_binary:
            return self.binary_data
        return self.content.encode("utf-8")

    def to_dict(self) -> dict:
        out = {"content": self.content, "content_type": self.content_type}
        if self.binary_data is not None:
            out["data"] = base64.b64encode(self.binary_data).decode("ascii")
        return out


def encode(value: StoredValue) -> bytes:
    """Serialize a StoredValue. Raises EncodingError on non-representable input."""
    if not isinstance(value.content, str) or not isinstance(value.content_type, str):
        raise EncodingError("content and content_type must be strings")
    if value.binary_data is not None and not isinstance(value.binary_data, (bytes, bytearray)):
        raise EncodingError("binary_data must be bytes")
    try:
        return json.dumps(value.to_dict(), ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Value is not representable as UTF-8: {e}") from e


def decode(raw: bytes) -> StoredValue:
    """Inverse of encode. Raises DecodingError on malformed input, never partially decodes."""
    try:
        obj = json.loads(bytes(raw).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodingError(f"Stored value is not valid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise DecodingError("Stored value is not a JSON object")

    content = obj.get("content")
    content_type = obj.get("content_type")
    if not isinstance(content, str) or not isinstance(content_type, str):
        raise DecodingError("Stored value is missing content or content_type")

    binary_data = None
    if "data" in obj:
        data = obj["data"]
        if not isinstance(data, str):
            raise DecodingError("Stored value has non-string data")
        try:
            binary_data = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodingError(f"Stored value has invalid base64 data: {e}") from e

    return StoredValue(content=content, content_type=content_type, binary_data=binary_data)
