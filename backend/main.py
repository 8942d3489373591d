"""
PathStore Backend API
Hierarchical content store: payloads addressed by slash-delimited paths.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import paths_router
from config import Settings, get_settings
from repositories import PathStore

logger = logging.getLogger(__name__)

USAGE = (
    "GET /{path} - Retrieve data",
    "POST /{path} - Store data with JSON body",
    "PUT /{path} - Store raw data with Content-Type header",
    "DELETE /{path} - Delete data",
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # open failure is fatal
        with PathStore(settings.PATHSTORE_DATA_DIR, timeout=settings.PATHSTORE_ENGINE_TIMEOUT) as store:
            app.state.store = store
            logger.info("API usage:")
            for line in USAGE:
                logger.info("  %s", line)
            try:
                yield
            finally:
                app.state.store = None

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse({"detail": "Invalid JSON"}, status_code=400)

    app.include_router(paths_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8080)
