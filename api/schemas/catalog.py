"""
Catalog request and response schemas.

These Pydantic models define the API contract and provide automatic
validation and documentation. JSON keys are camelCase (imageUrl,
publishDate, categoryId); snake_case is accepted on input as well.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Fixed path segments under /api/articles; an article with one of these
# slugs could never be fetched by slug.
RESERVED_ARTICLE_SLUGS = frozenset({"featured", "recent", "search", "category", "id"})


class CatalogModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =========================================
# Categories
# =========================================


class CategoryCreateRequest(CatalogModel):
    """Request body for creating a category."""

    name: str = Field(..., min_length=1, examples=["Direito Penal"])
    slug: str = Field(..., pattern=SLUG_PATTERN, examples=["direito-penal"])
    description: Optional[str] = None
    icon_name: Optional[str] = Field(default=None, examples=["gavel"])
    image_url: Optional[str] = None


class CategoryResponse(CatalogModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon_name: Optional[str] = None
    image_url: Optional[str] = None


# =========================================
# Articles
# =========================================


class ArticleCreateRequest(CatalogModel):
    """Request body for creating an article."""

    title: str = Field(..., min_length=1)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    excerpt: str
    content: str
    image_url: Optional[str] = None
    publish_date: datetime = Field(..., examples=["2025-05-12T00:00:00Z"])
    category_id: int = Field(..., description="Id of the owning category")
    featured: Optional[Literal[0, 1]] = Field(
        default=None,
        description="1 to promote the article on the home page",
    )

    @field_validator("slug")
    @classmethod
    def slug_not_reserved(cls, value: str) -> str:
        if value in RESERVED_ARTICLE_SLUGS:
            raise ValueError(f"slug '{value}' is reserved")
        return value

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Aluguel: 5 cláusulas abusivas que você não deve aceitar",
                    "slug": "aluguel-clausulas-abusivas",
                    "excerpt": "Antes de assinar o contrato de locação...",
                    "content": "O contrato de locação residencial é regido pela Lei 8.245/91...",
                    "imageUrl": None,
                    "publishDate": "2025-05-12T00:00:00Z",
                    "categoryId": 2,
                    "featured": 1,
                }
            ]
        }
    )


class ArticleResponse(CatalogModel):
    """An article with its category resolved (null when unresolved)."""

    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    publish_date: datetime
    category_id: int
    featured: Optional[int] = None
    category: Optional[CategoryResponse] = None


class ArticleCreateResponse(CatalogModel):
    """A freshly created article, as stored (no category join)."""

    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    publish_date: datetime
    category_id: int
    featured: Optional[int] = None


# =========================================
# Solutions
# =========================================


class SolutionCreateRequest(CatalogModel):
    """Request body for creating a solution promo."""

    title: str = Field(..., min_length=1)
    description: str
    image_url: Optional[str] = None
    link: str = Field(..., min_length=1, examples=["/contato"])
    link_text: str = Field(..., min_length=1, examples=["Agendar consulta"])


class SolutionResponse(CatalogModel):
    id: int
    title: str
    description: str
    image_url: Optional[str] = None
    link: str
    link_text: str
