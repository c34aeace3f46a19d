"""
Catalog records and the repository contract.

The records are immutable snapshots created once by a repository; nothing
in the catalog updates or deletes them. Every storage backend implements
BaseCatalogRepository so the HTTP layer never depends on a concrete store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    id: int
    username: str
    password: str


@dataclass(frozen=True)
class Category:
    """A subject area articles are filed under (e.g. "Direito Penal")."""
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon_name: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """
    A published article.

    category_id is expected to reference an existing Category, but it is
    not checked; readers get the category through join resolution.
    featured is 1 for promoted articles, 0 or None otherwise.
    """
    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    publish_date: datetime
    category_id: int
    image_url: Optional[str] = None
    featured: Optional[int] = None


@dataclass(frozen=True)
class ArticleWithCategory(Article):
    """An article with its owning category attached (None when unresolved)."""
    category: Optional[Category] = None

    @classmethod
    def from_article(
        cls, article: Article, category: Optional[Category]
    ) -> "ArticleWithCategory":
        return cls(**vars(article), category=category)


@dataclass(frozen=True)
class Solution:
    """A promotional block pointing readers to a service or product."""
    id: int
    title: str
    description: str
    link: str
    link_text: str
    image_url: Optional[str] = None


class BaseCatalogRepository(ABC):
    """
    Abstract base class for catalog storage.

    All methods are async so that an in-memory store and a database-backed
    store can sit behind the same interface. Lookups return None when
    nothing matches; they never raise for absence.
    """

    @abstractmethod
    async def setup(self) -> None:
        """
        Prepare the backend for serving.

        Must be called once before the repository is handed to callers.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        pass

    @abstractmethod
    async def stats(self) -> dict[str, int]:
        """Number of stored records per entity type."""
        pass

    # Users

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create_user(self, *, username: str, password: str) -> User:
        pass

    # Categories

    @abstractmethod
    async def get_categories(self) -> list[Category]:
        """All categories in creation order."""
        pass

    @abstractmethod
    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        """First category with the given slug, in creation order."""
        pass

    @abstractmethod
    async def create_category(
        self,
        *,
        name: str,
        slug: str,
        description: Optional[str] = None,
        icon_name: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Category:
        pass

    # Articles

    @abstractmethod
    async def get_articles(self) -> list[ArticleWithCategory]:
        """All articles in creation order, joined with their category."""
        pass

    @abstractmethod
    async def get_article_by_id(self, article_id: int) -> Optional[ArticleWithCategory]:
        pass

    @abstractmethod
    async def get_article_by_slug(self, slug: str) -> Optional[ArticleWithCategory]:
        pass

    @abstractmethod
    async def get_articles_by_category(self, category_slug: str) -> list[ArticleWithCategory]:
        """
        Articles filed under the category with the given slug.

        Returns an empty list when no category has that slug.
        """
        pass

    @abstractmethod
    async def get_featured_articles(self) -> list[ArticleWithCategory]:
        """Articles with featured == 1, newest first."""
        pass

    @abstractmethod
    async def get_recent_articles(self, limit: int) -> list[ArticleWithCategory]:
        """The `limit` newest articles by publish date."""
        pass

    @abstractmethod
    async def search_articles(self, query: str) -> list[ArticleWithCategory]:
        """
        Case-insensitive substring search over title, excerpt and content.

        Results keep creation order.
        """
        pass

    @abstractmethod
    async def create_article(
        self,
        *,
        title: str,
        slug: str,
        excerpt: str,
        content: str,
        publish_date: datetime,
        category_id: int,
        image_url: Optional[str] = None,
        featured: Optional[int] = None,
    ) -> Article:
        pass

    # Solutions

    @abstractmethod
    async def get_solutions(self) -> list[Solution]:
        pass

    @abstractmethod
    async def create_solution(
        self,
        *,
        title: str,
        description: str,
        link: str,
        link_text: str,
        image_url: Optional[str] = None,
    ) -> Solution:
        pass
