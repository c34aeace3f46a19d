"""
FastAPI dependencies for dependency injection.

The catalog repository is created in the application lifespan and kept
on app.state; handlers receive it through get_repository.
"""

from fastapi import FastAPI, Request

from core.storage import BaseCatalogRepository


def set_repository(app: FastAPI, repository: BaseCatalogRepository) -> None:
    """Attach the catalog repository to the application."""
    app.state.repository = repository


async def get_repository(request: Request) -> BaseCatalogRepository:
    """
    Dependency that provides the catalog repository.

    Usage:
        @router.get("/categories")
        async def list_categories(
            repository: BaseCatalogRepository = Depends(get_repository)
        ):
            ...
    """
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Catalog repository not initialized")
    return repository
