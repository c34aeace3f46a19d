"""
In-memory storage backend.

Keeps one EntityStore per entity type for the lifetime of the process.
Nothing is persisted; a restart reloads the seed catalog.
"""

from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from core.logging import get_logger
from core.storage import queries
from core.storage.base import (
    Article,
    ArticleWithCategory,
    BaseCatalogRepository,
    Category,
    Solution,
    User,
)


logger = get_logger(__name__)

RecordT = TypeVar("RecordT")


class EntityStore(Generic[RecordT]):
    """
    Keyed collection for a single entity type.

    Ids start at 1 and only ever move forward. Records are kept in
    insertion order, which is also id order.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: dict[int, RecordT] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        """Reserve the next id. A reserved id is never handed out again."""
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def insert(self, record_id: int, record: RecordT) -> None:
        self._records[record_id] = record

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def list_records(self) -> list[RecordT]:
        return list(self._records.values())

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """First record, in insertion order, for which predicate is true."""
        return next(
            (record for record in self._records.values() if predicate(record)),
            None,
        )

    def __len__(self) -> int:
        return len(self._records)


class InMemoryCatalogRepository(BaseCatalogRepository):
    """
    Catalog repository backed by plain dictionaries.

    The seed catalog is loaded by the constructor, so a repository is
    fully populated before anyone can query it. Pass seed=False for an
    empty store.

    Slug uniqueness and Article.category_id are not checked on write:
    lookups by slug return the first match, and articles with an unknown
    category are joined with category=None.
    """

    def __init__(self, seed: bool = True):
        self.users: EntityStore[User] = EntityStore("users")
        self.categories: EntityStore[Category] = EntityStore("categories")
        self.articles: EntityStore[Article] = EntityStore("articles")
        self.solutions: EntityStore[Solution] = EntityStore("solutions")

        if seed:
            from core.storage.seed import seed_catalog

            seed_catalog(self)

    # =========================================
    # Synchronous writers (also used by the seed loader)
    # =========================================

    def add_user(self, *, username: str, password: str) -> User:
        user = User(id=self.users.allocate_id(), username=username, password=password)
        self.users.insert(user.id, user)
        logger.debug("User created", user_id=user.id, username=username)
        return user

    def add_category(
        self,
        *,
        name: str,
        slug: str,
        description: Optional[str] = None,
        icon_name: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Category:
        category = Category(
            id=self.categories.allocate_id(),
            name=name,
            slug=slug,
            description=description,
            icon_name=icon_name,
            image_url=image_url,
        )
        self.categories.insert(category.id, category)
        logger.debug("Category created", category_id=category.id, slug=slug)
        return category

    def add_article(
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
        if self.categories.get(category_id) is None:
            logger.warning(
                "Article references unknown category",
                slug=slug,
                category_id=category_id,
            )

        # Naive and aware datetimes cannot be compared when sorting
        if publish_date.tzinfo is None:
            publish_date = publish_date.replace(tzinfo=timezone.utc)

        article = Article(
            id=self.articles.allocate_id(),
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=content,
            publish_date=publish_date,
            category_id=category_id,
            image_url=image_url,
            featured=featured,
        )
        self.articles.insert(article.id, article)
        logger.debug("Article created", article_id=article.id, slug=slug)
        return article

    def add_solution(
        self,
        *,
        title: str,
        description: str,
        link: str,
        link_text: str,
        image_url: Optional[str] = None,
    ) -> Solution:
        solution = Solution(
            id=self.solutions.allocate_id(),
            title=title,
            description=description,
            link=link,
            link_text=link_text,
            image_url=image_url,
        )
        self.solutions.insert(solution.id, solution)
        logger.debug("Solution created", solution_id=solution.id)
        return solution

    def _joined_articles(self) -> list[ArticleWithCategory]:
        return queries.join_categories(self.articles.list_records(), self.categories.get)

    # =========================================
    # Lifecycle
    # =========================================

    async def setup(self) -> None:
        logger.info("In-memory catalog repository ready", **await self.stats())

    async def close(self) -> None:
        logger.info("In-memory catalog repository closed")

    async def stats(self) -> dict[str, int]:
        return {
            store.name: len(store)
            for store in (self.users, self.categories, self.articles, self.solutions)
        }

    # =========================================
    # Users
    # =========================================

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    async def create_user(self, *, username: str, password: str) -> User:
        return self.add_user(username=username, password=password)

    # =========================================
    # Categories
    # =========================================

    async def get_categories(self) -> list[Category]:
        return self.categories.list_records()

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        return self.categories.get(category_id)

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self.categories.find(lambda category: category.slug == slug)

    async def create_category(
        self,
        *,
        name: str,
        slug: str,
        description: Optional[str] = None,
        icon_name: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Category:
        return self.add_category(
            name=name,
            slug=slug,
            description=description,
            icon_name=icon_name,
            image_url=image_url,
        )

    # =========================================
    # Articles
    # =========================================

    async def get_articles(self) -> list[ArticleWithCategory]:
        return self._joined_articles()

    async def get_article_by_id(self, article_id: int) -> Optional[ArticleWithCategory]:
        article = self.articles.get(article_id)
        if article is None:
            return None
        return queries.join_category(article, self.categories.get)

    async def get_article_by_slug(self, slug: str) -> Optional[ArticleWithCategory]:
        article = self.articles.find(lambda candidate: candidate.slug == slug)
        if article is None:
            return None
        return queries.join_category(article, self.categories.get)

    async def get_articles_by_category(self, category_slug: str) -> list[ArticleWithCategory]:
        category = await self.get_category_by_slug(category_slug)
        if category is None:
            return []
        return [
            article
            for article in self._joined_articles()
            if article.category_id == category.id
        ]

    async def get_featured_articles(self) -> list[ArticleWithCategory]:
        return queries.newest_first(queries.featured_only(self._joined_articles()))

    async def get_recent_articles(self, limit: int) -> list[ArticleWithCategory]:
        return queries.most_recent(self._joined_articles(), limit)

    async def search_articles(self, query: str) -> list[ArticleWithCategory]:
        return queries.search(self._joined_articles(), query)

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
        return self.add_article(
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=content,
            publish_date=publish_date,
            category_id=category_id,
            image_url=image_url,
            featured=featured,
        )

    # =========================================
    # Solutions
    # =========================================

    async def get_solutions(self) -> list[Solution]:
        return self.solutions.list_records()

    async def create_solution(
        self,
        *,
        title: str,
        description: str,
        link: str,
        link_text: str,
        image_url: Optional[str] = None,
    ) -> Solution:
        return self.add_solution(
            title=title,
            description=description,
            link=link,
            link_text=link_text,
            image_url=image_url,
        )
