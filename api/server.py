"""
FastAPI application entry point.

Sets up the application with:
- Lifespan management (startup/shutdown)
- Route registration
- Middleware configuration
- Error handling
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import set_repository
from api.routes import articles_router, categories_router, health_router, solutions_router
from core.config import settings
from core.logging import configure_logging, get_logger
from core.storage import BaseCatalogRepository, create_catalog_repository


logger = get_logger(__name__)


def create_app(repository: Optional[BaseCatalogRepository] = None) -> FastAPI:
    """
    Application factory.

    Args:
        repository: Catalog repository to serve. When omitted, one is
            created from settings during startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging()

        logger.info(
            "Starting catalog service...",
            storage_backend=settings.storage_backend,
        )

        # Seeding happens in the repository constructor, before any request
        if repository is not None:
            catalog = repository
        else:
            catalog = create_catalog_repository(settings)
        await catalog.setup()
        set_repository(app, catalog)

        logger.info(
            "Catalog service started",
            host=settings.server_host,
            port=settings.server_port,
            storage_backend=settings.storage_backend,
        )

        yield

        logger.info("Shutting down catalog service...")
        await catalog.close()
        logger.info("Catalog service stopped")

    app = FastAPI(
        title="Desenrola Direito Catalog API",
        description=(
            "Categories, articles and solution promos for the "
            "Desenrola Direito legal-education site."
        ),
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(articles_router)
    app.include_router(solutions_router)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.server:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug,
    )
