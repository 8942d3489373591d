"""Path-addressed content: read, JSON write, raw write, delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from api.deps import get_store, require_path
from api.helpers import is_header_value, store_http_error, success
from repositories import DEFAULT_BINARY_TYPE, PathStore, StoreError, StoredValue
from schemas.requests import ValueWrite

logger = logging.getLogger(__name__)
router = APIRouter(tags=["paths"])

StoreDep = Annotated[PathStore, Depends(get_store)]
PathDep = Annotated[str, Depends(require_path)]


@router.get("/{path:path}")
async def read_value(path: PathDep, store: StoreDep):
    """Serve the stored payload. Binary data wins over text when both are present."""
    try:
        value = await run_in_threadpool(store.get, path)
    except StoreError as e:
        raise store_http_error(e, "Database error")
    return Response(content=value.body, headers={"Content-Type": value.content_type})


@router.post("/{path:path}")
async def write_json(path: PathDep, body: ValueWrite, store: StoreDep):
    if not body.content_type:
        raise HTTPException(400, "content_type is required")
    if not is_header_value(body.content_type):
        raise HTTPException(400, "content_type is not a valid header value")
    value = StoredValue(
        content=body.content,
        content_type=body.content_type,
        binary_data=body.data,
    )
    try:
        await run_in_threadpool(store.put, path, value)
    except StoreError as e:
        raise store_http_error(e, "Failed to store data")
    return JSONResponse(success(f"Data stored at path: {path}"))


@router.put("/{path:path}")
async def write_raw(path: PathDep, request: Request, store: StoreDep):
    """Store the raw request body under the request's Content-Type."""
    try:
        payload = await request.body()
    except Exception as e:
        logger.warning("Failed to read body for %s: %s", path, e)
        raise HTTPException(400, "Failed to read body")
    content_type = request.headers.get("content-type") or DEFAULT_BINARY_TYPE
    value = StoredValue(content="", content_type=content_type, binary_data=payload)
    try:
        await run_in_threadpool(store.put, path, value)
    except StoreError as e:
        raise store_http_error(e, "Failed to store data")
    return JSONResponse(
        success(f"Data stored at path: {path}", size=f"{len(payload)} bytes")
    )


@router.delete("/{path:path}")
async def delete_value(path: PathDep, store: StoreDep):
    # existence check
    try:
        await run_in_threadpool(store.get, path)
    except StoreError as e:
        raise store_http_error(e, "Database error")
    try:
        await run_in_threadpool(store.delete, path)
    except StoreError as e:
        raise store_http_error(e, "Failed to delete data")
    return JSONResponse(success(f"Data deleted at path: {path}"))
