"""
Storage abstraction layer.

Provides the catalog repository interface and its backends:
- In-memory (entity stores seeded with the initial catalog)
"""

from core.storage.base import (
    Article,
    ArticleWithCategory,
    BaseCatalogRepository,
    Category,
    Solution,
    User,
)
from core.storage.factory import (
    create_catalog_repository,
    get_storage_backend,
    StorageBackend,
)

__all__ = [
    # Records
    "Article",
    "ArticleWithCategory",
    "Category",
    "Solution",
    "User",
    # Abstract interface
    "BaseCatalogRepository",
    # Factory functions
    "create_catalog_repository",
    "get_storage_backend",
    "StorageBackend",
]
