from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router as api_v1_router
from app.config.logging import setup_logging
from app.config.settings import settings
from app.core.logging import get_logger
from app.core.middleware import register_exception_handlers, register_middlewares
from app.db.init_db import init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema creation on startup; production deployments manage the schema themselves
    if not settings.is_production():
        init_db()
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


def create_app(init_schema: bool = True) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging, title, version and debug mode from Settings.
    - Registers CORS, core middleware and exception handlers.
    - Includes the versioned API router under ``settings.API_V1_STR``.

    Args:
        init_schema: Create missing tables on startup (tests pass False and
            manage their own database)
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan if init_schema else None,
    )

    allow_all = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.CORS_ORIGINS,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app, include_security=True)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.get("/health", tags=["System Health"])
    def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.API_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.is_development())
