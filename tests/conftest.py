"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SEED_DATA", "true")

from core.storage.memory import InMemoryCatalogRepository  # noqa: E402


@pytest.fixture
def empty_repository():
    """A repository with no seed data, so ids start at 1."""
    return InMemoryCatalogRepository(seed=False)


@pytest.fixture
def seeded_repository():
    """A repository loaded with the initial catalog."""
    return InMemoryCatalogRepository()
