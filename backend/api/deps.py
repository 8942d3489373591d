"""FastAPI dependencies and require-helpers for routes."""

from fastapi import HTTPException, Request

from repositories import PathStore


def get_store(request: Request) -> PathStore:
    """Return the PathStore opened by the app lifespan. Use in Depends()."""
    return request.app.state.store


def require_path(path: str) -> str:
    """Return the store key for the request path or raise 400 when it is empty."""
    if not path:
        raise HTTPException(400, "Path is required")
    return path
