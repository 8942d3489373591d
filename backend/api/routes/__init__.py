"""API route modules."""

from .paths import router as paths_router

__all__ = ["paths_router"]
