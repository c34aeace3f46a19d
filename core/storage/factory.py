"""
Storage factory for creating catalog repository instances.

The backend is chosen from configuration so that a database-backed
repository can be added later without touching the HTTP layer.
"""

from enum import Enum
from typing import TYPE_CHECKING

from core.logging import get_logger
from core.storage.base import BaseCatalogRepository


if TYPE_CHECKING:
    from core.config import Settings


logger = get_logger(__name__)


class StorageBackend(str, Enum):
    """Supported storage backends."""
    MEMORY = "memory"


def get_storage_backend(settings: "Settings") -> StorageBackend:
    """
    Determine which storage backend to use based on settings.

    Raises:
        ValueError: if the configured backend is not supported
    """
    backend_str = settings.storage_backend.lower()

    try:
        return StorageBackend(backend_str)
    except ValueError:
        raise ValueError(
            f"Unsupported storage backend: {backend_str}. "
            f"Supported backends: {[b.value for b in StorageBackend]}"
        )


def create_catalog_repository(settings: "Settings") -> BaseCatalogRepository:
    """
    Create a catalog repository based on settings.

    The in-memory repository is seeded on construction unless
    settings.seed_data is false. Call setup() before serving.
    """
    backend = get_storage_backend(settings)

    if backend == StorageBackend.MEMORY:
        from core.storage.memory import InMemoryCatalogRepository

        logger.info("Creating in-memory catalog repository", seed=settings.seed_data)
        return InMemoryCatalogRepository(seed=settings.seed_data)

    raise ValueError(f"Unsupported backend: {backend}")
