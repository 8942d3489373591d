"""Tests for the StoredValue codec."""

import json

import pytest

from repositories import DecodingError, EncodingError, StoredValue, decode, encode


@pytest.mark.parametrize(
    "value",
    [
        StoredValue(content="# hi", content_type="text/markdown"),
        StoredValue(content_type="image/png", binary_data=b"\x89PNG"),
        StoredValue(content_type="application/octet-stream", binary_data=b""),
        StoredValue(content="", content_type="text/plain"),
        StoredValue(content="naïve — ✓", content_type="text/plain; charset=utf-8"),
        StoredValue(content="both", content_type="application/x-mixed", binary_data=bytes(range(256))),
    ],
)
def test_round_trip(value):
    assert decode(encode(value)) == value


def test_empty_and_absent_binary_are_distinct():
    absent = decode(encode(StoredValue(content_type="text/plain")))
    empty = decode(encode(StoredValue(content_type="text/plain", binary_data=b"")))
    assert absent.binary_data is None
    assert empty.binary_data == b""
    assert absent != empty


def test_encoding_uses_original_field_names():
    obj = json.loads(encode(StoredValue(content="x", content_type="text/plain", binary_data=b"ab")))
    assert obj == {"content": "x", "content_type": "text/plain", "data": "YWI="}


def test_body_prefers_binary_payload():
    value = StoredValue(content="ignored", content_type="image/png", binary_data=b"\x89PNG")
    assert value.is_binary
    assert value.body == b"\x89PNG"


def test_body_falls_back_to_text_when_binary_empty():
    value = StoredValue(content="text", content_type="text/plain", binary_data=b"")
    assert not value.is_binary
    assert value.body == b"text"


def test_encode_rejects_unrepresentable_text():
    with pytest.raises(EncodingError):
        encode(StoredValue(content="\ud800", content_type="text/plain"))


def test_encode_rejects_non_bytes_payload():
    with pytest.raises(EncodingError):
        encode(StoredValue(content_type="text/plain", binary_data="not bytes"))


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"{\"content\": \"x\", \"content_type\"",
        b"\xff\xfe",
        b"[1, 2]",
        b"{\"content_type\": \"text/plain\"}",
        b"{\"content\": \"x\", \"content_type\": 5}",
        b"{\"content\": \"x\", \"content_type\": \"t\", \"data\": 12}",
        b"{\"content\": \"x\", \"content_type\": \"t\", \"data\": \"not base64!\"}",
    ],
)
def test_decode_rejects_malformed(raw):
    with pytest.raises(DecodingError):
        decode(raw)
