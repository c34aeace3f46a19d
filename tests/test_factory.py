"""
Tests for storage backend selection.
"""

import pytest

from core.config import Settings
from core.storage import StorageBackend, create_catalog_repository, get_storage_backend
from core.storage.memory import InMemoryCatalogRepository


def test_memory_backend_is_default():
    assert get_storage_backend(Settings()) == StorageBackend.MEMORY


def test_unsupported_backend_raises():
    settings = Settings.model_construct(storage_backend="cassandra")

    with pytest.raises(ValueError, match="Unsupported storage backend"):
        get_storage_backend(settings)


@pytest.mark.asyncio
async def test_seed_data_setting_controls_seeding():
    seeded = create_catalog_repository(Settings(seed_data=True))
    empty = create_catalog_repository(Settings(seed_data=False))

    assert isinstance(seeded, InMemoryCatalogRepository)
    assert (await seeded.stats())["categories"] > 0
    assert (await empty.stats())["categories"] == 0
