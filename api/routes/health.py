"""
Health check endpoints.

Provides endpoints for monitoring and load balancer health checks.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_repository
from core.storage import BaseCatalogRepository


router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Basic health check.

    Returns 200 if the service is running.
    """
    return {
        "status": "OK",
        "message": "Desenrola Direito API funcionando!",
    }


@router.get("/ready")
async def readiness_check(
    repository: BaseCatalogRepository = Depends(get_repository),
) -> dict:
    """
    Readiness check.

    The repository is seeded before it is attached to the app, so being
    able to reach it means the catalog can be served.
    """
    return {
        "status": "ready",
        "counts": await repository.stats(),
    }
