"""
Article endpoints.

- GET /api/articles - List articles
- GET /api/articles/featured - Featured articles, newest first
- GET /api/articles/recent?limit=N - N newest articles
- GET /api/articles/search?q=... - Search title, excerpt and content
- GET /api/articles/category/{slug} - Articles in a category
- GET /api/articles/id/{article_id} - Get article by id
- GET /api/articles/{slug} - Get article by slug
- POST /api/articles - Create article

Every article returned by a GET carries its category.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_repository
from api.schemas import ArticleCreateRequest, ArticleCreateResponse, ArticleResponse
from core.config import settings
from core.logging import get_logger
from core.storage import ArticleWithCategory, BaseCatalogRepository


logger = get_logger(__name__)
router = APIRouter(prefix="/api/articles", tags=["Articles"])


def _to_response(articles: list[ArticleWithCategory]) -> list[ArticleResponse]:
    return [ArticleResponse.model_validate(article) for article in articles]


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[ArticleResponse]:
    return _to_response(await repository.get_articles())


@router.get("/featured", response_model=list[ArticleResponse])
async def list_featured_articles(
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[ArticleResponse]:
    return _to_response(await repository.get_featured_articles())


@router.get("/recent", response_model=list[ArticleResponse])
async def list_recent_articles(
    limit: Optional[int] = Query(default=None, ge=1, description="Number of articles"),
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[ArticleResponse]:
    if limit is None:
        limit = settings.recent_articles_limit
    return _to_response(await repository.get_recent_articles(limit))


@router.get("/search", response_model=list[ArticleResponse])
async def search_articles(
    q: str = Query(default="", description="Text to look for"),
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[ArticleResponse]:
    """Case-insensitive search over title, excerpt and content."""
    if not q.strip():
        raise HTTPException(
            status_code=400,
            detail="Search query is required",
        )

    results = await repository.search_articles(q)
    logger.debug("Article search", query=q, matches=len(results))
    return _to_response(results)


@router.get("/category/{slug}", response_model=list[ArticleResponse])
async def list_articles_by_category(
    slug: str,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[ArticleResponse]:
    """Unknown category slugs yield an empty list."""
    return _to_response(await repository.get_articles_by_category(slug))


@router.get("/id/{article_id}", response_model=ArticleResponse)
async def get_article_by_id(
    article_id: int,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> ArticleResponse:
    article = await repository.get_article_by_id(article_id)

    if article is None:
        raise HTTPException(
            status_code=404,
            detail=f"Article {article_id} not found",
        )

    return ArticleResponse.model_validate(article)


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> ArticleResponse:
    article = await repository.get_article_by_slug(slug)

    if article is None:
        raise HTTPException(
            status_code=404,
            detail=f"Article {slug} not found",
        )

    return ArticleResponse.model_validate(article)


@router.post("", response_model=ArticleCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    request: ArticleCreateRequest,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> ArticleCreateResponse:
    """
    Create an article.

    categoryId is stored as given, even when no such category exists.
    """
    logger.info(
        "Creating article",
        slug=request.slug,
        category_id=request.category_id,
    )

    article = await repository.create_article(
        title=request.title,
        slug=request.slug,
        excerpt=request.excerpt,
        content=request.content,
        publish_date=request.publish_date,
        category_id=request.category_id,
        image_url=request.image_url,
        featured=request.featured,
    )
    return ArticleCreateResponse.model_validate(article)
