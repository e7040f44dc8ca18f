from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from core.exceptions import GcsMockError
from core.storage import InMemoryStorage, ObjectStorage
from services.api.exception_handlers import (
    gcs_mock_exception_handler,
    unhandled_exception_handler,
)
from services.api.middleware import AccessLogMiddleware
from services.api.routes import router as storage_router


def create_app(storage: ObjectStorage | None = None) -> FastAPI:
    """Build the API around ``storage``.

    The store is attached as ``app.state.storage``. Seed it (e.g. from a
    manifest) before handing the app to a server.
    """
    app = FastAPI(
        title="GCS Mock Service",
        version="0.1.0",
        description="In-memory subset of the Google Cloud Storage JSON API",
    )
    app.state.storage = storage if storage is not None else InMemoryStorage()

    app.add_middleware(AccessLogMiddleware)

    @app.get("/health", response_class=PlainTextResponse, tags=["meta"])
    async def healthcheck() -> str:
        return "OK"

    app.add_exception_handler(GcsMockError, gcs_mock_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(storage_router)

    return app


__all__ = ["create_app"]
