"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.errors import (
    AuthorizationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from app.infra.logging_config import LoggingConfig, get_logger
from app.routers import snippets_router, system

logger = get_logger("main")


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": [
                    {"loc": ["body", exc.field], "msg": exc.message, "type": "value_error"}
                ]
            },
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(request: Request, exc: AuthorizationError):
        return JSONResponse(status_code=403, content={"detail": exc.message})

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error("Request %s %s failed: %s", request.method, request.url.path, exc.cause)
        return JSONResponse(status_code=500, content={"detail": "Server error"})


def create_app(testing: bool = False) -> FastAPI:
    settings = get_settings()
    LoggingConfig(level="WARNING" if testing else settings.log_level)

    app = FastAPI(title=settings.app_name)
    _register_exception_handlers(app)
    app.include_router(system.router)
    app.include_router(snippets_router.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)
