from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.api.errors import register_exception_handlers
from backoffice.api.v1.router import router as api_v1_router
from backoffice.config.settings import settings
from backoffice.core.logging import setup_logging
from backoffice.core.middleware import register_middlewares
from backoffice.db.init_db import init_db


def create_app(create_tables: bool = True) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging, title, version and debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID and timing
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok", "environment": settings.ENVIRONMENT}

    # For production, manage the schema with migrations
    if create_tables:
        @app.on_event("startup")
        async def on_startup() -> None:
            if settings.ENVIRONMENT != "production":
                init_db()

    return app


app = create_app()
