from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .errors import StorageError, ValidationError, field_errors
from .storage import Storage, build_storage

from .api.volunteers import router as volunteers_router
from .api.guests import router as guests_router
from .api.staff import router as staff_router
from .api.people import router as people_router
from .api.stats import router as stats_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the API around one record store.

    Pass `storage` to inject a ready-made store (tests do this); otherwise
    the store named by STORAGE_BACKEND is built from `settings`.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Check-In Dashboard API",
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Shutdown ---
    @app.on_event("shutdown")
    def _shutdown() -> None:
        app.state.storage.close()

    # --- Error envelope ---
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data", "errors": field_errors(exc.errors())},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": exc.message, "errors": exc.errors})

    @app.exception_handler(StorageError)
    async def storage_handler(request: Request, exc: StorageError):
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    # --- Health / meta ---
    @app.get("/health", tags=["meta"])
    def health() -> Dict[str, Any]:
        return {
            "ok": True,
            "env": settings.env,
            "storage": app.state.storage.backend,
        }

    @app.get("/version", tags=["meta"])
    def version() -> Dict[str, Any]:
        return {"version": settings.app_version}

    # --- API routers ---
    app.include_router(volunteers_router)
    app.include_router(guests_router)
    app.include_router(staff_router)
    app.include_router(people_router)
    app.include_router(stats_router)

    return app


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    import uvicorn

    # reload should be True in local dev, False in prod.
    uvicorn.run(
        "checkin.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
