"""
Category endpoints.

- GET /api/categories - List categories
- GET /api/categories/{slug} - Get category by slug
- POST /api/categories - Create category
"""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_repository
from api.schemas import CategoryCreateRequest, CategoryResponse
from core.logging import get_logger
from core.storage import BaseCatalogRepository


logger = get_logger(__name__)
router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[CategoryResponse]:
    categories = await repository.get_categories()
    return [CategoryResponse.model_validate(category) for category in categories]


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(
    slug: str,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> CategoryResponse:
    category = await repository.get_category_by_slug(slug)

    if category is None:
        raise HTTPException(
            status_code=404,
            detail=f"Category {slug} not found",
        )

    return CategoryResponse.model_validate(category)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreateRequest,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> CategoryResponse:
    """
    Create a category.

    Slug uniqueness is not checked; lookups by slug return the first match.
    """
    logger.info("Creating category", slug=request.slug)

    category = await repository.create_category(
        name=request.name,
        slug=request.slug,
        description=request.description,
        icon_name=request.icon_name,
        image_url=request.image_url,
    )
    return CategoryResponse.model_validate(category)
