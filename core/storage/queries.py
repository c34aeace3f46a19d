"""
Join resolution and read-shaping helpers for articles.

These are pure functions over already-loaded records, shared by every
repository variant that keeps articles in memory.
"""

from typing import Callable, Iterable, Optional

from core.storage.base import Article, ArticleWithCategory, Category


CategoryLookup = Callable[[int], Optional[Category]]


def join_category(article: Article, lookup: CategoryLookup) -> ArticleWithCategory:
    """
    Attach the owning category to an article.

    A dangling category_id yields category=None instead of an error.
    """
    return ArticleWithCategory.from_article(article, lookup(article.category_id))


def join_categories(
    articles: Iterable[Article], lookup: CategoryLookup
) -> list[ArticleWithCategory]:
    return [join_category(article, lookup) for article in articles]


def newest_first(articles: Iterable[ArticleWithCategory]) -> list[ArticleWithCategory]:
    """
    Sort by publish date, newest first.

    sorted() is stable with reverse=True, so articles sharing a publish
    date keep their creation order.
    """
    return sorted(articles, key=lambda article: article.publish_date, reverse=True)


def featured_only(articles: Iterable[ArticleWithCategory]) -> list[ArticleWithCategory]:
    return [article for article in articles if article.featured == 1]


def most_recent(
    articles: Iterable[ArticleWithCategory], limit: int
) -> list[ArticleWithCategory]:
    """Newest `limit` articles; all of them when limit exceeds the count."""
    if limit <= 0:
        return []
    return newest_first(articles)[:limit]


def matches_query(article: Article, query: str) -> bool:
    needle = query.lower()
    return (
        needle in article.title.lower()
        or needle in article.excerpt.lower()
        or needle in article.content.lower()
    )


def search(
    articles: Iterable[ArticleWithCategory], query: str
) -> list[ArticleWithCategory]:
    # The empty query is a substring of everything
    return [article for article in articles if matches_query(article, query)]
